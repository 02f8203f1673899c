"""
Lift helpers with semantic namespaces.

Supports the same import styles as the rest of the package:
    from datachannel import lift as L   # Recommended
    from datachannel import lift        # Explicit

Architecture:
- L.up.*    - values, nullables, kungfu values and raising code -> Channel / Optional
- L.down.*  - Channel / Optional -> plain or kungfu values
- L.call()  - call raising functions with lifting
- L.lifted  - decorator form of L.call

Examples:
    from datachannel import lift as L

    user = L.up.pure(User(id=42))
    error = L.up.fail(NotFoundError())
    maybe = L.up.optional(db_result, error=lambda: NotFoundError())

    port = L.call(int, raw, on_error=lambda e: ConfigError(str(e)))

    result = L.down.to_result(user)          # kungfu Ok(Some(User(id=42)))
    value = L.down.or_else(maybe, default=GUEST)
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

# Most common functions at the root
from .up import catching, fail, from_option, from_result, nullable, optional, pure
from .call import call, lifted
from .down import or_else, to_option, to_result, unsafe

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "nullable",
    "optional",
    "from_result",
    "from_option",
    "catching",
    # Call
    "call",
    "lifted",
    # Down
    "to_result",
    "to_option",
    "or_else",
    "unsafe",
)
