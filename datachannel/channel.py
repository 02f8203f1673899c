"""
Channel
=======

Result with optional data: an operation either failed with an error E,
or succeeded and may or may not have produced a T.

    Failure(error)               - terminal failure, carries the error
    Success(Present(value))      - success with data
    Success(Absent)              - success, nothing to report

Failures are plain data. Nothing here raises on the happy path; the
forward_* family moves a Failure along untouched and only runs the
caller's code on Success.

Two questions must not be conflated:
    channel.has_optional_data   # succeeded (payload may still be Absent)
    channel.has_value           # succeeded AND the payload is Present
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from ._errors import MissingErrorError, NotAnOptionalError, SumTypeBaseError
from .option import Absent, Optional, Present


class Channel[E, T]:
    """
    Base of the Failure / Success sum type.

    Not instantiated directly: use Failure(error), Success(payload), or the
    static constructors below.

    The forward_* methods take the prior channel as their receiver, so both
    spellings work:
        Channel.forward_with_value(prior, profile)
        prior.forward_with_value(profile)
    """

    __slots__ = ()

    def __new__(cls, *args: typing.Any, **kwargs: typing.Any) -> typing.Self:
        if cls is Channel:
            raise SumTypeBaseError(cls)
        return super().__new__(cls)

    # Constructors

    @staticmethod
    def from_error[Err, V](error: Err, /) -> Channel[Err, V]:
        """Failed channel."""
        return Failure(error)

    @staticmethod
    def from_value[Err, V](value: V, /) -> Channel[Err, V]:
        """Successful channel carrying value."""
        return Success(Present(value))

    @staticmethod
    def empty[Err, V]() -> Channel[Err, V]:
        """Successful channel with no data."""
        return Success(Absent())

    @staticmethod
    def from_optional[Err, V](payload: Optional[V], /) -> Channel[Err, V]:
        """Successful channel using an existing Optional as its payload, without re-wrapping."""
        return Success(payload)

    @staticmethod
    def auto[Err, V](value: V | None, /) -> Channel[Err, V]:
        """Successful channel: with data if value is not None, empty otherwise."""
        return Success(Optional.auto(value))

    # Checks

    @property
    def is_failure(self) -> bool:
        """True for Failure."""
        return isinstance(self, Failure)

    @property
    def is_success(self) -> bool:
        """True for Success, whatever its payload."""
        return isinstance(self, Success)

    @property
    def has_optional_data(self) -> bool:
        """
        True for every Success, including Success(Absent).

        This answers "did it fail?", not "is there a value?". Check
        has_value (or the payload) before reading data.
        """
        return self.is_success

    @property
    def has_value(self) -> bool:
        """True only for a Success whose payload is Present."""
        match self:
            case Success(payload):
                return payload.is_present
            case Failure(_):
                return False
            case _ as unreachable:
                assert_never(unreachable)

    # Consumption

    def fold[U](
        self,
        *,
        on_failure: Callable[[E], U],
        on_success: Callable[[Optional[T]], U],
    ) -> U:
        """
        Exhaustive match: exactly one of the two branches is called.

            message = channel.fold(
                on_failure=lambda err: f"failed: {err}",
                on_success=lambda data: data.map(str).unwrap_or("nothing"),
            )
        """
        match self:
            case Failure(error):
                return on_failure(error)
            case Success(payload):
                return on_success(payload)
            case _ as unreachable:
                assert_never(unreachable)

    def pick(
        self,
        *,
        on_error: Callable[[E], object] | None = None,
        on_no_error: Callable[[Optional[T]], object] | None = None,
        on_data: Callable[[T], object] | None = None,
        on_no_data: Callable[[], object] | None = None,
    ) -> None:
        """
        Cherry-pick side-effect handlers; every handler is optional.

        Failure -> on_error(error).
        Success -> on_no_error(payload) if given, otherwise on_data(value)
        for a Present payload or on_no_data() for an Absent one.

        At most one handler runs. Handlers that are not given are skipped.
        """
        match self:
            case Failure(error):
                if on_error is not None:
                    on_error(error)
            case Success(payload):
                if on_no_error is not None:
                    on_no_error(payload)
                    return
                match payload:
                    case Present(value):
                        if on_data is not None:
                            on_data(value)
                    case Absent():
                        if on_no_data is not None:
                            on_no_data()
            case _ as unreachable:
                assert_never(unreachable)

    def error_or_none(self) -> E | None:
        """The error of a Failure, None for a Success."""
        match self:
            case Failure(error):
                return error
            case Success(_):
                return None
            case _ as unreachable:
                assert_never(unreachable)

    def data_or_none(self) -> T | None:
        """The payload value of a Success, None for a Failure or an Absent payload."""
        match self:
            case Failure(_):
                return None
            case Success(payload):
                return payload.unwrap_or_none()
            case _ as unreachable:
                assert_never(unreachable)

    # Transformations

    def map_error[F](self, transform: Callable[[E], F], /) -> Channel[F, T]:
        """Transform the error of a Failure. A Success passes through and transform is not called."""
        match self:
            case Failure(error):
                return Failure(transform(error))
            case Success(payload):
                return Success(payload)
            case _ as unreachable:
                assert_never(unreachable)

    def map_data[U](self, transform: Callable[[T], U], /) -> Channel[E, U]:
        """
        Transform the payload value, keeping failure propagation.

        Shorthand for forward_or_else(lambda payload: payload.map(transform)).
        """
        return self.forward_or_else(lambda payload: payload.map(transform))

    # Propagation

    def forward_with_value[U](self, new_value: U, /) -> Channel[E, U]:
        """
        Propagate a Failure, or replace any Success with Success(Present(new_value)).

        new_value is already evaluated when this is called, even if the
        prior channel failed. Use forward_or_else to build it lazily.
        """
        match self:
            case Failure(error):
                return Failure(error)
            case Success(_):
                return Success(Present(new_value))
            case _ as unreachable:
                assert_never(unreachable)

    def forward_with_absent[U](self) -> Channel[E, U]:
        """Propagate a Failure, or replace any Success with Success(Absent)."""
        match self:
            case Failure(error):
                return Failure(error)
            case Success(_):
                return Success(Absent())
            case _ as unreachable:
                assert_never(unreachable)

    def forward_or_else[U](self, builder: Callable[[Optional[T]], Optional[U]], /) -> Channel[E, U]:
        """
        Propagate a Failure, or rebuild the payload of a Success.

        builder receives the current payload and returns the new one. It is
        never called for a Failure.

            user_channel.forward_or_else(
                lambda user: user.filter(lambda u: u.verified).map(Profile.from_user)
            )
        """
        match self:
            case Failure(error):
                return Failure(error)
            case Success(payload):
                new_payload = builder(payload)
                if not isinstance(new_payload, Optional):
                    raise NotAnOptionalError(new_payload, where="forward_or_else() result")
                return Success(new_payload)
            case _ as unreachable:
                assert_never(unreachable)

    # Protocol methods

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


class Failure[E, T](Channel[E, T]):
    """A failed Channel carrying its error."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E, /) -> None:
        if error is None:
            raise MissingErrorError()
        object.__setattr__(self, "_error", error)

    @property
    def error(self) -> E:
        """The error value."""
        return self._error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Channel):
            return NotImplemented
        return isinstance(other, Failure) and other._error == self._error

    def __hash__(self) -> int:
        return hash((Failure, self._error))

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


class Success[E, T](Channel[E, T]):
    """A successful Channel whose payload may or may not hold a value."""

    __slots__ = ("_payload",)
    __match_args__ = ("payload",)

    def __init__(self, payload: Optional[T], /) -> None:
        if not isinstance(payload, Optional):
            raise NotAnOptionalError(payload, where="Success() payload")
        object.__setattr__(self, "_payload", payload)

    @property
    def payload(self) -> Optional[T]:
        """The payload Optional."""
        return self._payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Channel):
            return NotImplemented
        return isinstance(other, Success) and other._payload == self._payload

    def __hash__(self) -> int:
        return hash((Success, self._payload))

    def __repr__(self) -> str:
        return f"Success({self._payload!r})"


__all__ = ("Channel", "Failure", "Success")
