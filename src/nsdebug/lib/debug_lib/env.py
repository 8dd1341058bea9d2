"""
Environment access for debug_lib.

Two concerns live here:
  1. The enable spec persisted in ``DEBUG`` so a restarted process comes
     back with the same namespaces switched on.
  2. Inspect options read from ``DEBUG_*`` variables:

        $ DEBUG_COLORS=no DEBUG_DEPTH=4 DEBUG_HIDE_DATE=yes python app.py

Both take a plain mapping (``os.environ`` by default) so tests can hand
in a dict instead of touching the real environment.
"""

import math
import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, MutableMapping, Optional


DEFAULT_ENV_VAR = 'DEBUG'

_TRUE_RE = re.compile(r'^(yes|on|true|enabled)$', re.IGNORECASE)
_FALSE_RE = re.compile(r'^(no|off|false|disabled)$', re.IGNORECASE)
_OPTION_PREFIX = 'debug_'


class EnvStore:
    """Read/write access to the persisted enable spec.

    Usage::

        store = EnvStore()              # backed by os.environ
        store.save("server:*")
        store.load()                    # -> "server:*"
        store.save("")                  # deletes DEBUG
    """

    def __init__(self, environ: MutableMapping[str, str] = None,
                 var: str = DEFAULT_ENV_VAR):
        self.environ = environ if environ is not None else os.environ
        self.var = var

    def load(self) -> Optional[str]:
        """Return the persisted spec, or None when unset."""
        return self.environ.get(self.var)

    def save(self, spec) -> None:
        """Persist a non-empty string spec; anything else clears it."""
        if isinstance(spec, str) and spec:
            self.environ[self.var] = spec
        else:
            self.clear()

    def clear(self) -> None:
        self.environ.pop(self.var, None)


@dataclass
class InspectOptions:
    """Display options parsed from ``DEBUG_*`` variables.

    Attributes:
        colors: Force ANSI colors on/off; None means decide from the stream
        depth: Maximum nesting depth for %o / %O inspection
        hide_date: Omit the timestamp from plain (no-color) lines
        extra: Any other DEBUG_* option, keyed by lower-cased suffix
    """
    colors: Optional[bool] = None
    depth: Optional[int] = None
    hide_date: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)


def parse_option_value(raw: str) -> Any:
    """Convert a DEBUG_* value into a bool, None or number.

    Unrecognized text becomes NaN, mirroring a failed numeric parse.
    """
    if _TRUE_RE.match(raw):
        return True
    if _FALSE_RE.match(raw):
        return False
    if raw == 'null':
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        return math.nan
    return int(value) if value.is_integer() else value


def load_inspect_options(environ: MutableMapping[str, str] = None) -> InspectOptions:
    """Build InspectOptions from every ``DEBUG_*`` variable (case-insensitive)."""
    environ = environ if environ is not None else os.environ
    opts = InspectOptions()
    for key, raw in environ.items():
        if not key.lower().startswith(_OPTION_PREFIX):
            continue
        name = key[len(_OPTION_PREFIX):].lower()
        value = parse_option_value(raw)
        if name == 'colors':
            opts.colors = None if value is None else bool(value)
        elif name == 'depth':
            if isinstance(value, (int, float)) and not isinstance(value, bool) \
                    and not math.isnan(value):
                opts.depth = int(value)
        elif name == 'hide_date':
            opts.hide_date = bool(value)
        else:
            opts.extra[name] = value
    return opts
