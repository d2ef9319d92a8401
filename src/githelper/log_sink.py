# githelper/log_sink.py
"""
Log sinks - the user-visible, append-only record of every git call.

This is the "output channel" a user reads, not python logging. Runners
receive a sink explicitly at construction time; there is no module-level
singleton.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class LogSink(Protocol):
    """Append-only text surface."""

    def append_line(self, text: str) -> None:
        """Append one line (text may itself contain newlines)."""
        ...

    def show(self) -> None:
        """Make the sink visible to the user. Non-blocking and idempotent."""
        ...


class StreamLogSink:
    """
    Writes lines to a text stream (stdout by default, or an open file).

    show() flushes, which is as "visible" as a terminal gets.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stdout

    def append_line(self, text: str) -> None:
        self._stream.write(f"{text}\n")

    def show(self) -> None:
        self._stream.flush()

    def __repr__(self) -> str:
        name = getattr(self._stream, "name", type(self._stream).__name__)
        return f"StreamLogSink(stream={name!r})"


class MemoryLogSink:
    """Keeps every line in memory. Useful for embedding and for tests."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.show_count = 0

    def append_line(self, text: str) -> None:
        self.lines.append(text)

    def show(self) -> None:
        self.show_count += 1

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()
        self.show_count = 0

    def __repr__(self) -> str:
        return f"MemoryLogSink(lines={len(self.lines)})"
