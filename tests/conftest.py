"""Pytest configuration and fixtures.

Laziness is part of the contract of several operations, so most tests
count calls through a Probe instead of only comparing outputs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from .helpers import Probe


@pytest.fixture
def probe() -> Callable[[Callable[..., Any]], Probe]:
    """Factory fixture: probe(fn) wraps fn in a call-counting Probe."""
    return Probe
