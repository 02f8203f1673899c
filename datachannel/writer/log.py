"""
Log - immutable monoidal accumulator for ChannelWriter
======================================================
"""

from __future__ import annotations


class Log[A](tuple[A, ...]):
    """
    Ordered, immutable sequence of log entries.

    Monoid:
    - empty: Log()
    - combine: concatenation

    Laws:
    - Log().combine(x) == x
    - x.combine(Log()) == x
    - x.combine(y).combine(z) == x.combine(y.combine(z))
    """

    __slots__ = ()

    @staticmethod
    def of[V](*entries: V) -> Log[V]:
        """Log holding entries, in order."""
        return Log(entries)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Entries of self followed by entries of other.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log('a', 'b', 'c')
        """
        return Log((*self, *other))

    def tell(self, entry: A, /) -> Log[A]:
        """Same log with one more entry at the end."""
        return Log((*self, entry))

    def __repr__(self) -> str:
        return f"Log({', '.join(repr(entry) for entry in self)})"


__all__ = ("Log",)
