"""Reading a stream line by line in fixed-size chunks, and here-document input."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

BUFFER_SIZE = 5


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield lines of ``stream``, each keeping its trailing newline.

    The stream is read ``buffer_size`` units at a time; a final line without a
    newline is yielded as it is. Works with text and binary streams.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = None
    newline = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        if pending is None:
            pending = chunk
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
        else:
            pending += chunk
        while newline in pending:
            line, _, pending = pending.partition(newline)
            yield line + newline
    if pending:
        yield pending


def read_here_doc(stream: IO[AnyStr], limiter: str) -> AnyStr:
    """Return everything read from ``stream`` up to the line ``limiter``.

    Only a line that is exactly the limiter followed by a newline ends the
    input; the limiter line itself is not included.
    """
    parts = []
    stop = None
    for line in iter_lines(stream):
        if stop is None:
            stop = (limiter.encode() + b"\n") if isinstance(line, bytes) else limiter + "\n"
        if line == stop:
            break
        parts.append(line)
    if not parts:
        return b"" if isinstance(stop, bytes) else ""
    return parts[0][:0].join(parts)