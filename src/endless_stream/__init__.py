"""endless-stream package initialisation."""

from .core import EOF, CircularStream, SharedBuffer, StreamFactory, open_stream

__all__ = [
    "EOF",
    "CircularStream",
    "SharedBuffer",
    "StreamFactory",
    "open_stream",
    "core",
    "generation",
    "shared",
]
