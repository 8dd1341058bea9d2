"""
Debugger — a single named debug channel.

A Debugger owns its enabled flag (kept current by the Registry), a color,
the timestamp of its previous emit, and an optional sink. emit() is a
no-op while disabled; otherwise it renders the message, prefixes the
namespace, appends the elapsed time since this channel last emitted and
hands the line to its sink (or the registry's default sink).

    http = Debugger("server:http")
    http.emit("request %s took %dms", path, 12)
    #   server:http request /index took 12ms +3ms

    auth = http.extend("auth")          # "server:http:auth"
"""

import enum
import re
import traceback
from typing import Any, List, Tuple

from .colors import decorate, select_color, timestamp
from .formatting import format_message, humanize_ms
from .registry import Registry, get_registry
from .sinks import Sink


_CUSTOM_DIRECTIVE_RE = re.compile(r'%([a-zA-Z%])')


class ArgKind(enum.Enum):
    """Classification of the first argument passed to emit()."""
    ERROR = 'error'
    STRING = 'string'
    OTHER = 'other'


def classify_first_arg(value: Any) -> ArgKind:
    if isinstance(value, BaseException):
        return ArgKind.ERROR
    if isinstance(value, str):
        return ArgKind.STRING
    return ArgKind.OTHER


def describe_error(exc: BaseException) -> str:
    """Traceback text when the exception carries one, else 'Type: message'."""
    if exc.__traceback__ is not None:
        lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
    else:
        lines = traceback.format_exception_only(type(exc), exc)
    return ''.join(lines).rstrip('\n')


class Debugger:
    """A debug channel for one namespace.

    Attributes:
        namespace: Channel identity, e.g. "server:http" (read-only)
        color: Color code derived from the namespace (read-only)
        enabled: Whether emit() produces output; maintained by the registry
        sink: Per-channel output callable, or None for the registry default
        use_colors: Decorate with ANSI colors (snapshot of the registry default)
        diff: Elapsed milliseconds computed by the last emit
    """

    def __init__(self, namespace: str, sink: Sink = None, registry: Registry = None):
        self.registry = registry if registry is not None else get_registry()
        self._namespace = namespace
        self._color = select_color(namespace)
        self.sink = sink
        self.use_colors = self.registry.use_colors()
        self.diff = 0
        self._prev_time = None
        self.enabled = False
        # register() sets enabled under the registry lock
        self.registry.register(self)

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def color(self) -> int:
        return self._color

    def __repr__(self):
        state = 'enabled' if self.enabled else 'disabled'
        return f"<Debugger {self._namespace!r} {state}>"

    def emit(self, *args: Any) -> None:
        """Format and output a message if this channel is enabled.

        The first argument is the format string. An exception in that
        position is replaced by its traceback text; any other non-string
        value is inspected via an implicit "%O" and every argument shifts
        to the argument list.
        """
        if not self.enabled:
            return

        curr = self.registry.clock()
        prev = self._prev_time if self._prev_time is not None else curr
        self.diff = curr - prev
        try:
            fmt, rest = self._coerce_args(args)
            fmt, rest = self.apply_formatters(fmt, rest)
            message = format_message(fmt, *rest, depth=self.registry.inspect_opts.depth)
            self._write(message)
        finally:
            self._prev_time = curr

    def _coerce_args(self, args: Tuple[Any, ...]) -> Tuple[str, List[Any]]:
        if not args:
            return '', []
        first, rest = args[0], list(args[1:])
        kind = classify_first_arg(first)
        if kind is ArgKind.ERROR:
            return describe_error(first), rest
        if kind is ArgKind.STRING:
            return first, rest
        return '%O', [first] + rest

    def apply_formatters(self, fmt: str, args: List[Any]) -> Tuple[str, List[Any]]:
        """Expand %<letter> directives that have a registered custom formatter.

        Each expansion consumes (and removes) its positional argument, so
        the general formatter never sees it. Directives without a custom
        formatter are left in place and keep their argument.
        """
        formatters = self.registry.formatters
        if not formatters:
            return fmt, args
        args = list(args)
        index = 0

        def substitute(match):
            nonlocal index
            directive, letter = match.group(0), match.group(1)
            if directive == '%%':
                return directive
            formatter = formatters.get(letter)
            if callable(formatter):
                value = args.pop(index) if index < len(args) else None
                return str(formatter(self, value))
            index += 1
            return directive

        return _CUSTOM_DIRECTIVE_RE.sub(substitute, fmt), args

    def _write(self, message: str) -> None:
        opts = self.registry.inspect_opts
        date = None if self.use_colors or opts.hide_date else timestamp()
        line = decorate(message, self._namespace, self._color,
                        humanize_ms(self.diff), use_colors=self.use_colors, date=date)
        sink = self.sink if self.sink is not None else self.registry.default_sink
        sink(line)

    def destroy(self) -> bool:
        """Detach from the registry and disable permanently.

        Returns:
            True if the channel was registered, False if already destroyed
        """
        removed = self.registry.unregister(self)
        self.enabled = False
        return removed

    def extend(self, sub_namespace: str, delimiter: str = ':') -> 'Debugger':
        """Create a child channel named ``namespace + delimiter + sub_namespace``.

        The child starts with this channel's current sink but is otherwise
        independent: its own color, enabled state and registry entry.
        """
        return Debugger(f"{self._namespace}{delimiter}{sub_namespace}",
                        sink=self.sink, registry=self.registry)
