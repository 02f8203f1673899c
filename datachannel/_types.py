"""
Core type definitions for datachannel.

Aliases shared by the option, channel, lift and writer modules.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = zero-arg callable, evaluated only when its value is needed
type Thunk[T] = Callable[[], T]

# NoError = error type of a Channel that can never be a Failure
# NOTE: Never (bottom type) rather than None: a Failure always carries a
#       genuine value, so None is not a valid error.
type NoError = typing.Never

__all__ = (
    "Predicate",
    "Thunk",
    "NoError",
)
