"""nsdebug — namespace-scoped debug channels.

Create named channels, switch subsets on and off with wildcard specs
(``DEBUG=server:*,-server:debug``), and get color-coded lines with the
time elapsed since each channel last spoke.

    from nsdebug import create_debug, enable

    log = create_debug("server:http")
    enable("server:*")
    log.emit("listening on %d", 8080)

The module-level functions operate on the process-wide registry; build a
``Registry`` directly for isolated state.
"""

from nsdebug._version import __version__, __app_name__
from nsdebug.lib.debug_lib import (
    Debugger, Registry, StreamSink, get_registry, init_registry, trace,
)


def create_debug(namespace, sink=None):
    """Create a channel on the process-wide registry."""
    return get_registry().create(namespace, sink=sink)


debug = create_debug


def enable(spec):
    """Enable namespaces matching ``spec`` (replaces the previous spec)."""
    get_registry().enable(spec)


def disable():
    """Disable all namespaces, returning the spec that was active."""
    return get_registry().disable()


def enabled(namespace):
    """Return True if ``namespace`` would be enabled right now."""
    return get_registry().enabled(namespace)


def formatters():
    """The live custom formatter table (letter -> fn(debugger, value))."""
    return get_registry().formatters


__all__ = [
    "__version__", "__app_name__",
    "create_debug", "debug", "enable", "disable", "enabled", "formatters",
    "Debugger", "Registry", "StreamSink", "get_registry", "init_registry",
    "trace",
]
