"""
Enable-spec parsing for debug namespaces.

An enable spec is a single string of comma- or whitespace-separated
tokens. Each token is a namespace pattern; ``*`` matches any run of
characters (including none) and every other character is literal.
A leading ``-`` turns the token into a deny (skip) rule.

    Examples:
        server:*                    # everything under server:
        server:*,-server:debug      # ...except server:debug
        *                           # all namespaces
        -*                          # nothing, even if allowed elsewhere

Patterns are anchored: ``server`` matches only ``server``, never
``server:http``.
"""

import re
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple


# One or more commas / whitespace characters separate tokens
_SPLIT_RE = re.compile(r'[\s,]+')


@dataclass(frozen=True)
class Matcher:
    """A compiled namespace pattern.

    Attributes:
        pattern: The token text with any leading ``-`` removed
        regex: Anchored expression equivalent to ``pattern``
    """
    pattern: str
    regex: re.Pattern = field(compare=False, repr=False)

    @classmethod
    def from_pattern(cls, pattern: str) -> 'Matcher':
        body = '.*?'.join(re.escape(part) for part in pattern.split('*'))
        return cls(pattern=pattern, regex=re.compile(body, re.DOTALL))

    def matches(self, namespace: str) -> bool:
        return self.regex.fullmatch(namespace) is not None


def split_spec(spec) -> List[str]:
    """Split a raw spec into non-empty tokens.

    Anything that is not a string is treated as an empty spec.
    """
    if not isinstance(spec, str):
        return []
    return [token for token in _SPLIT_RE.split(spec) if token]


def compile_spec(spec) -> Tuple[List[Matcher], List[Matcher]]:
    """Compile a raw enable spec into (allow, deny) matcher lists.

    Args:
        spec: Enable spec string like "server:*,-server:debug"

    Returns:
        Tuple of allow matchers and deny matchers, in spec order
    """
    allow: List[Matcher] = []
    deny: List[Matcher] = []
    for token in split_spec(spec):
        if token[0] == '-':
            deny.append(Matcher.from_pattern(token[1:]))
        else:
            allow.append(Matcher.from_pattern(token))
    return allow, deny


def serialize_matchers(allow: Sequence[Matcher], deny: Sequence[Matcher]) -> str:
    """Join matchers back into a spec string (allow first, then deny).

    The result compiles to an equivalent pair of matcher lists.
    """
    tokens = [m.pattern for m in allow]
    tokens.extend('-' + m.pattern for m in deny)
    return ','.join(tokens)
