"""Shared test doubles."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Probe:
    """Callable wrapper that records how often (and with what) it was called."""

    fn: Callable[..., Any]
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.fn(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


@dataclass(frozen=True)
class User:
    id: str
    name: str
    verified: bool = True


@dataclass(frozen=True)
class Profile:
    id: str
    name: str


class NetworkError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NetworkError) and other.message == self.message

    def __hash__(self) -> int:
        return hash(self.message)


class UserFacingError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
