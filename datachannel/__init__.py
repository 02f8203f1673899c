"""
datachannel - Optional and Channel types for Python.

Two small immutable sum types:
- Optional[T]:     Present(value) | Absent
- Channel[E, T]:   Failure(error) | Success(payload: Optional[T])

A producer returns a Channel; a consumer folds it or threads it through
map_error / map_data and the forward_* family, which pass a Failure along
without running the caller's code.

Architecture:
- option / channel - the two types and their combinators
- lift             - bridges to plain values, raising code and kungfu Result/Option
- writer           - Channel paired with an accumulated Log
"""

# Core types
from ._types import NoError, Predicate, Thunk
from .option import Absent, Optional, Present
from .channel import Channel, Failure, Success

# Lift helpers
from . import lift
from .lift import call, catching, lifted

# Writer
from . import writer
from .writer import ChannelWriter, Log, writer_empty, writer_error, writer_value

# Errors
from ._errors import (
    AbsentValueError,
    ChannelContractError,
    MissingErrorError,
    NestedOptionalError,
    NotAWriterError,
    NotAnOptionalError,
    SumTypeBaseError,
    UnwrapError,
)

__all__ = (
    # Types
    "NoError",
    "Predicate",
    "Thunk",
    # Optional
    "Optional",
    "Present",
    "Absent",
    # Channel
    "Channel",
    "Failure",
    "Success",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "call",
    "catching",
    "lifted",
    # Writer module
    "writer",
    "ChannelWriter",
    "Log",
    "writer_value",
    "writer_empty",
    "writer_error",
    # Errors
    "AbsentValueError",
    "ChannelContractError",
    "MissingErrorError",
    "NestedOptionalError",
    "NotAWriterError",
    "NotAnOptionalError",
    "SumTypeBaseError",
    "UnwrapError",
)
