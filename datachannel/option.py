"""
Optional
========

Zero-or-one value container with short-circuiting combinators.

Every Optional is either Present (holds exactly one value) or Absent
(holds nothing). Combinators never mutate the receiver; they return a new
Optional. Functions passed to a combinator run only when there is a value
to give them.

    Optional.present(5).map(lambda x: x * 2).unwrap_or(0)   # 10
    Optional.absent().map(lambda x: x * 2).unwrap_or(0)     # 0, lambda never called
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator
from typing import assert_never

from ._errors import AbsentValueError, NestedOptionalError, NotAnOptionalError, SumTypeBaseError
from ._types import Predicate, Thunk


class Optional[T]:
    """
    Base of the Present / Absent sum type.

    Not instantiated directly: use Present(value), Absent(), or the
    static constructors below.
    """

    __slots__ = ()

    def __new__(cls, *args: typing.Any, **kwargs: typing.Any) -> typing.Self:
        if cls is Optional:
            raise SumTypeBaseError(cls)
        return super().__new__(cls)

    # Constructors

    @staticmethod
    def present[V](value: V, /) -> Optional[V]:
        """Wrap a value. None and Optionals are rejected; see Present."""
        return Present(value)

    @staticmethod
    def absent[V]() -> Optional[V]:
        """The empty Optional."""
        return Absent()

    @staticmethod
    def auto[V](value: V | None, /) -> Optional[V]:
        """
        Present if value is not None, Absent otherwise.

        Use this for nullable values coming from dicts, ORMs, parsers:
            Optional.auto(row.get("email"))
        """
        if value is None:
            return Absent()
        return Present(value)

    # Checks

    @property
    def is_present(self) -> bool:
        """True for Present."""
        return isinstance(self, Present)

    @property
    def is_absent(self) -> bool:
        """True for Absent."""
        return isinstance(self, Absent)

    # Unwrapping

    def unwrap_or_none(self) -> T | None:
        """
        Contained value, or None when Absent.

        The one way back to a plain nullable value. Handy with match:
            match opt.unwrap_or_none():
                case None: ...
                case value: ...
        """
        match self:
            case Present(value):
                return value
            case Absent():
                return None
            case _ as unreachable:
                assert_never(unreachable)

    def unwrap_or(self, default: T, /) -> T:
        """Contained value, or default when Absent. default is computed by the caller."""
        match self:
            case Present(value):
                return value
            case Absent():
                return default
            case _ as unreachable:
                assert_never(unreachable)

    def unwrap_or_else(self, supplier: Thunk[T], /) -> T:
        """
        Contained value, or supplier() when Absent.

        supplier is called at most once, and never when Present:
            Optional.present(5).unwrap_or_else(expensive)  # 5, expensive not called
        """
        match self:
            case Present(value):
                return value
            case Absent():
                return supplier()
            case _ as unreachable:
                assert_never(unreachable)

    # Transformations

    def map[U](self, transform: Callable[[T], U], /) -> Optional[U]:
        """
        Apply transform to the contained value.

        A transform returning None yields Absent. A transform returning an
        Optional is rejected with NestedOptionalError; use flat_map for those.
        """
        match self:
            case Present(value):
                return Optional.auto(transform(value))
            case Absent():
                return Absent()
            case _ as unreachable:
                assert_never(unreachable)

    def flat_map[U](self, transform: Callable[[T], Optional[U]], /) -> Optional[U]:
        """
        Apply an Optional-returning transform and return its result as is.

            Optional.present(5).flat_map(lambda x: Optional.present(x * 2))  # Present(10)
            Optional.present(5).flat_map(lambda x: Optional.absent())        # Absent
        """
        match self:
            case Present(value):
                result = transform(value)
                if not isinstance(result, Optional):
                    raise NotAnOptionalError(result, where="flat_map() result")
                return result
            case Absent():
                return Absent()
            case _ as unreachable:
                assert_never(unreachable)

    def filter(self, predicate: Predicate[T], /) -> Optional[T]:
        """Keep the value only if predicate holds for it."""
        match self:
            case Present(value):
                return self if predicate(value) else Absent()
            case Absent():
                return self
            case _ as unreachable:
                assert_never(unreachable)

    def fold[U](
        self,
        *,
        on_present: Callable[[T], U],
        on_absent: Thunk[U],
    ) -> U:
        """Exhaustive match: exactly one of the two branches is called."""
        match self:
            case Present(value):
                return on_present(value)
            case Absent():
                return on_absent()
            case _ as unreachable:
                assert_never(unreachable)

    # Protocol methods

    def __iter__(self) -> Iterator[T]:
        """Iterate over zero or one values."""
        match self:
            case Present(value):
                yield value
            case Absent():
                return
            case _ as unreachable:
                assert_never(unreachable)

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


class Present[T](Optional[T]):
    """An Optional holding exactly one value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        if value is None:
            raise AbsentValueError()
        if isinstance(value, Optional):
            raise NestedOptionalError(value)
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        """The contained value."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return isinstance(other, Present) and other._value == self._value

    def __hash__(self) -> int:
        return hash((Present, self._value))

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


class Absent[T](Optional[T]):
    """An Optional holding nothing."""

    __slots__ = ()
    __match_args__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash(Absent)

    def __repr__(self) -> str:
        return "Absent"


__all__ = ("Absent", "Optional", "Present")
