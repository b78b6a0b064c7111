"""Output sinks that receive one rendered result per command."""

import sys
from typing import Optional, Protocol, TextIO


class OutputSink(Protocol):
    """Anything that accepts rendered command results."""

    def write(self, message: str) -> None:
        ...


class ConsoleSink:
    """Prints each result on its own line."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write(self, message: str) -> None:
        print(message, file=self.stream or sys.stdout)


class BufferSink:
    """Collects results in memory."""

    def __init__(self):
        self.lines: list[str] = []

    def write(self, message: str) -> None:
        self.lines.append(message)
