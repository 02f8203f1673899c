"""
Lowering Channel / Optional into plain or kungfu values.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Nothing, Ok, Option, Result, Some

from .._errors import UnwrapError
from ..channel import Channel, Failure, Success
from ..option import Absent, Optional, Present


def to_result[T, E](channel: Channel[E, T]) -> Result[Option[T], E]:
    """
    Convert a Channel into a kungfu Result.

    The optional payload survives as a kungfu Option:
        Success(Present(5)) -> Ok(Some(5))
        Success(Absent)     -> Ok(Nothing())
        Failure(err)        -> Error(err)
    """
    match channel:
        case Failure(error):
            return Error(error)
        case Success(payload):
            return Ok(to_option(payload))
        case _ as unreachable:
            assert_never(unreachable)


def to_option[T](optional: Optional[T]) -> Option[T]:
    """Convert an Optional into a kungfu Option."""
    match optional:
        case Present(value):
            return Some(value)
        case Absent():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def or_else[T, E](channel: Channel[E, T], default: T) -> T:
    """
    Payload value, or default for a Failure or an empty Success.

    Example:
        user = L.down.or_else(fetch_user(42), default=GUEST)
    """
    return channel.fold(
        on_failure=lambda _: default,
        on_success=lambda payload: payload.unwrap_or(default),
    )


def unsafe[T, E](channel: Channel[E, T]) -> T:
    """
    Payload value, raising UnwrapError for a Failure or an empty Success.

    Use only where a missing value is a bug.
    """
    match channel:
        case Success(Present(value)):
            return value
        case Success(Absent()) | Failure(_):
            raise UnwrapError(channel)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "to_result",
    "to_option",
    "or_else",
    "unsafe",
)
