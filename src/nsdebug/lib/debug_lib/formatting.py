"""
printf-style message formatting and elapsed-time humanizing.

Directives recognized by format_message():

    %s   str() of the argument
    %d   numeric coercion ("42.0" -> 42, unparsable -> NaN)
    %j   JSON; "[Circular]" when serialization fails
    %o   structural inspection on a single line
    %O   structural inspection, pretty-printed
    %%   literal percent (consumes no argument)

A directive with no argument left stays verbatim. Arguments left over
after the template are appended, space-separated.
"""

import json
import math
import pprint
import re
import sys
from typing import Any, Optional


_DIRECTIVE_RE = re.compile(r'%[sdjoO%]')

# Values appended with str() rather than inspection
_PRIMITIVES = (type(None), bool, int, float, str, bytes)

_SECOND = 1000
_MINUTE = _SECOND * 60
_HOUR = _MINUTE * 60
_DAY = _HOUR * 24


def to_number(value: Any) -> str:
    """Render a value the way a numeric coercion would."""
    if value is None:
        return '0'
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return '0'
        try:
            return str(int(text))
        except ValueError:
            pass
        try:
            return to_number(float(text))
        except ValueError:
            return 'NaN'
    return 'NaN'


def to_json(value: Any) -> str:
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError, RecursionError):
        return '[Circular]'


def inspect(value: Any, multiline: bool = False, depth: Optional[int] = None) -> str:
    """Structural rendering used by %o / %O and trailing arguments."""
    if multiline:
        return pprint.pformat(value, depth=depth, sort_dicts=False)
    return pprint.pformat(value, depth=depth, width=sys.maxsize, sort_dicts=False)


def format_message(template: Any = '', *args: Any, depth: Optional[int] = None) -> str:
    """Substitute printf-style directives in ``template`` with ``args``.

    Args:
        template: Format string; non-strings are coerced with str()
        *args: Values consumed left to right by the directives
        depth: Nesting limit for %o / %O inspection

    Returns:
        The rendered message
    """
    remaining = list(args)

    def substitute(match):
        directive = match.group(0)
        if directive == '%%':
            return '%'
        if not remaining:
            return directive
        value = remaining.pop(0)
        if directive == '%s':
            return str(value)
        if directive == '%d':
            return to_number(value)
        if directive == '%j':
            return to_json(value)
        return inspect(value, multiline=directive == '%O', depth=depth)

    text = _DIRECTIVE_RE.sub(substitute, str(template))
    for value in remaining:
        if isinstance(value, _PRIMITIVES):
            text += ' ' + str(value)
        else:
            text += ' ' + inspect(value, depth=depth)
    return text


def humanize_ms(ms: float) -> str:
    """Short human form of a millisecond duration: 250ms, 2s, 5m, 3h, 1d."""
    magnitude = abs(ms)
    for unit, size in (('d', _DAY), ('h', _HOUR), ('m', _MINUTE), ('s', _SECOND)):
        if magnitude >= size:
            return f"{_round_half_up(ms / size)}{unit}"
    return f"{_round_half_up(ms)}ms"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
