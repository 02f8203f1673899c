"""
Lifting values into Channel / Optional.

Functions for turning plain values, nullables, kungfu Result/Option values
and exception-based code into a Channel or an Optional.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never, assert_never

from kungfu import Error, Nothing, Ok, Option, Result, Some

from .._types import Thunk
from ..channel import Channel, Failure, Success
from ..option import Optional


def pure[T](value: T) -> Channel[Never, T]:
    """
    Lift a value into an always-successful Channel.

    Example:
        from datachannel import lift as L

        user = L.up.pure(User(id=42))  # Success(Present(User(id=42)))

    **Grammar:** `L.up.pure(value)` reads as "lift up pure value"
    """
    return Channel.from_value(value)


def fail[E](error: E) -> Channel[E, Never]:
    """
    Lift an error into a failed Channel. Dual of pure().

    Example:
        error = L.up.fail(ValidationError("bad input"))  # Failure(ValidationError(...))
    """
    return Channel.from_error(error)


def empty() -> Channel[Never, Never]:
    """Successful Channel with nothing to report."""
    return Channel.empty()


def nullable[T](value: T | None) -> Channel[Never, T]:
    """
    Lift a nullable value: None becomes Success(Absent).

    Use when "not found" is a normal outcome, not an error.
    For "not found is an error", use optional().
    """
    return Channel.auto(value)


def optional[T, E](
    value: T | None,
    *,
    error: Thunk[E],
) -> Channel[E, T]:
    """
    Lift a nullable value, treating None as a failure.

    Example:
        def get_user(user_id: int) -> Channel[NotFoundError, User]:
            user = db.find(user_id)  # User | None
            return L.up.optional(user, error=lambda: NotFoundError(user_id))

    NOTE: error is a thunk so the error is only built when value is None.
    """
    if value is None:
        return Failure(error())
    return Channel.from_value(value)


def from_result[T, E](result: Result[T, E]) -> Channel[E, T]:
    """
    Convert a kungfu Result into a Channel.

    Ok(value) -> Success with the value (Absent for Ok(None), Ok(Nothing()),
    and the inner value for Ok(Some(value))).
    Error(error) -> Failure(error).
    """
    match result:
        case Ok(value):
            match value:
                case Some() | Nothing():
                    return Success(from_option(value))
                case _:
                    return Channel.auto(value)
        case Error(err):
            return Failure(err)
        case _ as unreachable:
            assert_never(unreachable)


def from_option[T](option: Option[T]) -> Optional[T]:
    """Convert a kungfu Option into an Optional. Some(None) becomes Absent."""
    match option:
        case Some(value):
            return Optional.auto(value)
        case Nothing():
            return Optional.absent()
        case _ as unreachable:
            assert_never(unreachable)


def catching[T, E](
    thunk: Thunk[T | None],
    *,
    on_error: Callable[[Exception], E],
) -> Channel[E, T]:
    """
    Run a thunk, turning its exception into a Failure.

    A returned value becomes Success(Present(value)); a returned None becomes
    Success(Absent).

    Example:
        import json

        def parse(raw: str) -> Channel[ParseError, dict]:
            return L.up.catching(
                lambda: json.loads(raw),
                on_error=lambda e: ParseError(str(e)),
            )

    NOTE: Catches Exception subclasses only. KeyboardInterrupt and
          SystemExit propagate.
    """
    try:
        value = thunk()
    except Exception as exc:
        return Failure(on_error(exc))
    return Channel.auto(value)


__all__ = (
    "pure",
    "fail",
    "empty",
    "nullable",
    "optional",
    "from_result",
    "from_option",
    "catching",
)
