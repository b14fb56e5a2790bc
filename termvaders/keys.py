"""Reading single key presses from a stream, unbuffered when it is a terminal."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

try:
    import termios
except ImportError:  # not available on every platform
    termios = None  # type: ignore[assignment]


def _terminal_fd(stream: TextIO) -> Optional[int]:
    """Return the file descriptor of a terminal stream, or None."""
    try:
        if not stream.isatty():
            return None
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


@contextmanager
def _unbuffered(fd: int) -> Iterator[None]:
    """Turn off line buffering and echo on a terminal for the duration."""
    saved = termios.tcgetattr(fd)
    changed = termios.tcgetattr(fd)
    changed[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, changed)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def read_key(stream: Optional[TextIO] = None) -> str:
    """Read one character from the stream; return '' at end of input."""
    stream = sys.stdin if stream is None else stream
    fd = _terminal_fd(stream) if termios is not None else None
    if fd is None:
        return stream.read(1)
    with _unbuffered(fd):
        return stream.read(1)


def is_key_pressed(key: str, stream: Optional[TextIO] = None) -> bool:
    """Read one key and tell whether it is the given one."""
    return read_key(stream) == key