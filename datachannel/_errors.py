from __future__ import annotations

import typing


class ChannelContractError(TypeError):
    """Caller broke a construction contract of Optional or Channel."""


class AbsentValueError(ChannelContractError):
    """Present() was given None. Use Optional.auto() for nullable values."""

    def __init__(self) -> None:
        super().__init__("Present() cannot hold None; use Optional.auto() for nullable values")


class NestedOptionalError(ChannelContractError):
    """Present() was given an Optional. Flatten with flat_map() or from_optional()."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"Present() cannot hold another Optional ({value!r}); use flat_map()")


class MissingErrorError(ChannelContractError):
    """Failure() was given None as its error."""

    def __init__(self) -> None:
        super().__init__("Failure() requires an error value, got None")


class NotAnOptionalError(ChannelContractError):
    """A builder or transform expected to return an Optional returned something else."""

    got: typing.Any

    def __init__(self, got: typing.Any, *, where: str) -> None:
        self.got = got
        super().__init__(f"{where} must be an Optional, got {type(got).__name__}")


class SumTypeBaseError(ChannelContractError):
    """Optional or Channel was instantiated directly instead of through a variant."""

    base: type

    def __init__(self, base: type) -> None:
        self.base = base
        super().__init__(f"{base.__name__} cannot be instantiated directly; use its variants or constructors")


class NotAWriterError(ChannelContractError):
    """A then() step returned something other than a ChannelWriter."""

    got: typing.Any

    def __init__(self, got: typing.Any) -> None:
        self.got = got
        super().__init__(f"then() step must return a ChannelWriter, got {type(got).__name__}")


class UnwrapError(Exception):
    """Forced extraction of a value from a Failure or an Absent payload."""

    source: typing.Any

    def __init__(self, source: typing.Any) -> None:
        self.source = source
        super().__init__(f"Cannot unwrap a value from {source!r}")


__all__ = (
    "AbsentValueError",
    "ChannelContractError",
    "MissingErrorError",
    "NestedOptionalError",
    "NotAWriterError",
    "NotAnOptionalError",
    "SumTypeBaseError",
    "UnwrapError",
)
