"""
Output sinks.

A sink is any callable taking one fully formatted line. StreamSink is the
default: it writes the line plus a newline to a stream, stderr unless told
otherwise.
"""

import sys
from typing import Callable, TextIO

Sink = Callable[[str], None]


class StreamSink:
    """Write each line to ``file`` (default: sys.stderr at call time)."""

    def __init__(self, file: TextIO = None):
        self.file = file

    def __call__(self, line: str) -> None:
        print(line, file=self.file if self.file is not None else sys.stderr)

    def __repr__(self):
        return f"StreamSink(file={self.file!r})"
