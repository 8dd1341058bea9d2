"""Version information for nsdebug.

The single place to bump the release. ``__version__`` is the PEP 440
string setup.py publishes; PHASE is the pre-release segment, or None
for a final release.
"""

MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "a1"

__app_name__ = "nsdebug"
__version__ = f"{MAJOR}.{MINOR}.{PATCH}{PHASE or ''}"
