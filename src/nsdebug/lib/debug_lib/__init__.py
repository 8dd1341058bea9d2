"""
debug_lib — namespace-scoped debug channels.

A small library providing:
- Enable specs with ``*`` wildcards and ``-`` deny rules
- A registry that re-evaluates every live channel on enable()
- Debugger channels with color labels and "+Nms" elapsed annotations
- printf-style formatting with pluggable single-letter formatters
- Function tracing decorator

Public API:
    Registry          — matchers, live channels, formatters
    init_registry     — singleton initialization
    get_registry      — access singleton
    Debugger          — one debug channel
    Matcher           — compiled namespace pattern
    compile_spec      — parse an enable spec into allow/deny matchers
    format_message    — printf-style formatter
    select_color      — namespace color picker
    EnvStore          — DEBUG environment persistence
    StreamSink        — default line sink
    trace             — function tracing decorator
"""

from .registry import Registry, init_registry, get_registry
from .debugger import Debugger, ArgKind, classify_first_arg
from .patterns import Matcher, compile_spec, serialize_matchers
from .formatting import format_message, humanize_ms
from .colors import COLORS, select_color
from .env import EnvStore, InspectOptions, load_inspect_options
from .sinks import StreamSink
from .trace import trace

__all__ = [
    'Registry', 'init_registry', 'get_registry',
    'Debugger', 'ArgKind', 'classify_first_arg',
    'Matcher', 'compile_spec', 'serialize_matchers',
    'format_message', 'humanize_ms',
    'COLORS', 'select_color',
    'EnvStore', 'InspectOptions', 'load_inspect_options',
    'StreamSink',
    'trace',
]
