"""
Calling exception-based functions with automatic lifting into Channel.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from ..channel import Channel
from .up import catching


def call[T, E, **P](
    func: Callable[P, T | None],
    *args: P.args,
    on_error: Callable[[Exception], E],
    **kwargs: P.kwargs,
) -> Channel[E, T]:
    """
    Call a function that may raise or return None, and lift the outcome.

    **When to use:** at the call site of code you do not own (parsers,
    drivers, SDKs). Keeps the function itself free of Channel.

    Example:
        from datachannel import lift as L

        channel = L.call(int, raw_port, on_error=lambda e: ConfigError(str(e)))

    **Grammar:** `L.call(func, *args, on_error=...)` reads as "call function, lift outcome"

    NOTE: on_error is keyword-only and is never forwarded to func.
    """
    return catching(lambda: func(*args, **kwargs), on_error=on_error)


def lifted[T, E, **P](
    *,
    on_error: Callable[[Exception], E],
) -> Callable[[Callable[P, T | None]], Callable[P, Channel[E, T]]]:
    """
    Decorator form of call(): the decorated function returns a Channel.

    Example:
        @L.lifted(on_error=lambda e: LookupFailed(str(e)))
        def find_user(user_id: int) -> User | None:
            return repository.get(user_id)

        find_user(42)  # Success(Present(User)), Success(Absent) or Failure(LookupFailed)
    """

    def decorator(func: Callable[P, T | None]) -> Callable[P, Channel[E, T]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Channel[E, T]:
            return call(func, *args, on_error=on_error, **kwargs)

        return wrapper

    return decorator


__all__ = (
    "call",
    "lifted",
)
