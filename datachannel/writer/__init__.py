"""
Writer
======

ChannelWriter - a Channel that carries a log:
- Channel[E, T] (failure / success with optional data)
- Log[W] (entries accumulated step by step)

The log is data, returned to the caller; nothing is printed or emitted.
"""

from .log import Log
from .channel import ChannelWriter, writer_empty, writer_error, writer_value

__all__ = (
    "Log",
    "ChannelWriter",
    "writer_value",
    "writer_empty",
    "writer_error",
)
