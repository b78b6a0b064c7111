"""Command stream handling for the family tree."""
from src.commands.sink import OutputSink, ConsoleSink, BufferSink
from src.commands.dispatcher import CommandDispatcher

__all__ = ["OutputSink", "ConsoleSink", "BufferSink", "CommandDispatcher"]
