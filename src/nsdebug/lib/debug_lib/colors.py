"""
Namespace color selection and line decoration.

Every namespace gets a stable 256-color code picked by hashing its name
into COLORS. Two namespaces may share a color; that is fine.

Colored line:
    "  \\x1b[38;5;<c>;1m<namespace> \\x1b[0m<message> \\x1b[38;5;<c>m+12ms\\x1b[0m"

Plain line (colors suppressed):
    "2026-10-18T12:00:00.000Z [<namespace>] <message> +12ms"
"""

from datetime import datetime, timezone
from typing import Optional


# 256-color codes that read well on both dark and light terminals
COLORS = [
    20, 21, 26, 27, 32, 33, 38, 39, 40, 41, 42, 43, 44, 45, 56, 57,
    62, 63, 68, 69, 74, 75, 76, 77, 78, 79, 80, 81, 92, 93, 98, 99,
    112, 113, 128, 129, 134, 135, 148, 149, 160, 161, 162, 163, 164, 165,
    166, 167, 168, 169, 170, 171, 172, 173, 178, 179, 184, 185, 196, 197,
    198, 199, 200, 201, 202, 203, 204, 205, 206, 207, 208, 209, 214, 215,
    220, 221,
]

RESET = '\x1b[0m'


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def select_color(namespace: str) -> int:
    """Pick a color code for a namespace (deterministic 32-bit string hash)."""
    h = 0
    for ch in namespace:
        h = _to_int32((h << 5) - h + ord(ch))
    return COLORS[abs(h) % len(COLORS)]


def color_code(color: int) -> str:
    """ANSI foreground escape (without the final 'm') for a color code."""
    return '\x1b[3' + (str(color) if color < 8 else f'8;5;{color}')


def timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f"{now.microsecond // 1000:03d}Z"


def decorate(message: str, namespace: str, color: int, elapsed: str,
             use_colors: bool = True, date: Optional[str] = None) -> str:
    """Prefix every line of ``message`` with the namespace label and append
    the elapsed-time suffix.

    Args:
        message: Rendered message, may contain newlines
        namespace: Channel namespace shown in the label
        color: Color code from select_color()
        elapsed: Humanized elapsed time, e.g. "12ms"
        use_colors: Emit ANSI escapes; plain brackets otherwise
        date: Timestamp for plain lines; None or "" omits it

    Returns:
        The decorated line(s)
    """
    if use_colors:
        code = color_code(color)
        prefix = f"  {code};1m{namespace} {RESET}"
        suffix = f" {code}m+{elapsed}{RESET}"
    else:
        prefix = f"{date} [{namespace}] " if date else f"[{namespace}] "
        suffix = f" +{elapsed}"
    body = ('\n' + prefix).join(message.split('\n'))
    return prefix + body + suffix
