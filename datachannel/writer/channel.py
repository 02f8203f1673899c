"""ChannelWriter

A Channel paired with a Log of entries written along the way.

Every Channel operation is mirrored here; the log is carried through
untouched, and then() concatenates the logs of both steps. A Failure
short-circuits but keeps whatever was logged before it."""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from .._errors import NotAWriterError
from ..channel import Channel, Failure, Success
from ..option import Optional
from .log import Log


class ChannelWriter[E, T, W]:
    """Channel[E, T] + Log[W].

    Monadic laws (then):
    - Left identity: writer_value(a).then(f) ≡ f(Present(a))
    - Right identity: m.then(ChannelWriter.from_optional) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_channel", "_log")
    __match_args__ = ("channel", "log")

    def __init__(self, channel: Channel[E, T], log: Log[W] | None = None, /) -> None:
        object.__setattr__(self, "_channel", channel)
        object.__setattr__(self, "_log", Log() if log is None else Log(log))

    @staticmethod
    def from_channel[Err, V, LogT](channel: Channel[Err, V], /) -> ChannelWriter[Err, V, LogT]:
        """Wrap a Channel with an empty log."""
        return ChannelWriter(channel)

    @staticmethod
    def from_optional[Err, V, LogT](payload: Optional[V], /) -> ChannelWriter[Err, V, LogT]:
        """Successful writer using payload as is, with an empty log."""
        return ChannelWriter(Channel.from_optional(payload))

    @staticmethod
    def tell[LogEntry](*entries: LogEntry) -> ChannelWriter[typing.Never, typing.Never, LogEntry]:
        """Write entries without producing data."""
        return ChannelWriter(Channel.empty(), Log.of(*entries))

    @property
    def channel(self) -> Channel[E, T]:
        """The underlying Channel."""
        return self._channel

    @property
    def log(self) -> Log[W]:
        """The accumulated log."""
        return self._log

    # Channel operations (log preserved)

    def map_error[F](self, f: Callable[[E], F], /) -> ChannelWriter[F, T, W]:
        return ChannelWriter(self._channel.map_error(f), self._log)

    def map_data[U](self, f: Callable[[T], U], /) -> ChannelWriter[E, U, W]:
        return ChannelWriter(self._channel.map_data(f), self._log)

    def forward_with_value[U](self, new_value: U, /) -> ChannelWriter[E, U, W]:
        return ChannelWriter(self._channel.forward_with_value(new_value), self._log)

    def forward_with_absent[U](self) -> ChannelWriter[E, U, W]:
        return ChannelWriter(self._channel.forward_with_absent(), self._log)

    def forward_or_else[U](
        self,
        builder: Callable[[Optional[T]], Optional[U]],
        /,
    ) -> ChannelWriter[E, U, W]:
        return ChannelWriter(self._channel.forward_or_else(builder), self._log)

    def fold[U](
        self,
        *,
        on_failure: Callable[[E], U],
        on_success: Callable[[Optional[T]], U],
    ) -> U:
        """Fold the underlying Channel; the log is ignored."""
        return self._channel.fold(on_failure=on_failure, on_success=on_success)

    # Monad operations

    def then[U](
        self,
        f: Callable[[Optional[T]], ChannelWriter[E, U, W]],
        /,
    ) -> ChannelWriter[E, U, W]:
        """
        Monadic bind over the payload.

        - On Success: runs f with the payload, combines logs
        - On Failure: short-circuit, f is not called, current log kept
        """
        match self._channel:
            case Success(payload):
                nxt = f(payload)
                if not isinstance(nxt, ChannelWriter):
                    raise NotAWriterError(nxt)
                return ChannelWriter(nxt.channel, self._log.combine(nxt.log))
            case Failure(error):
                return ChannelWriter(Failure(error), self._log)
            case _ as unreachable:
                assert_never(unreachable)

    # Writer operations

    def with_log(self, *entries: W) -> ChannelWriter[E, T, W]:
        """Append entries to the log without touching the channel."""
        return ChannelWriter(self._channel, self._log.combine(Log.of(*entries)))

    def listen(self) -> ChannelWriter[E, tuple[Optional[T], Log[W]], W]:
        """Expose the log next to the payload of a Success."""
        match self._channel:
            case Success(payload):
                return ChannelWriter(Channel.from_value((payload, self._log)), self._log)
            case Failure(error):
                return ChannelWriter(Failure(error), self._log)
            case _ as unreachable:
                assert_never(unreachable)

    def censor(self, f: Callable[[Log[W]], Log[W]], /) -> ChannelWriter[E, T, W]:
        """Rewrite the log."""
        return ChannelWriter(self._channel, f(self._log))

    # Protocol methods

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError("ChannelWriter is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ChannelWriter is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChannelWriter):
            return NotImplemented
        return self._channel == other._channel and self._log == other._log

    def __hash__(self) -> int:
        return hash((self._channel, self._log))

    def __repr__(self) -> str:
        return f"ChannelWriter({self._channel!r}, log={self._log!r})"


# Convenience Constructors
def writer_value[T, W](value: T, *log_entries: W) -> ChannelWriter[typing.Never, T, W]:
    """Successful writer carrying value, with optional log entries."""
    return ChannelWriter(Channel.from_value(value), Log.of(*log_entries))


def writer_empty[W](*log_entries: W) -> ChannelWriter[typing.Never, typing.Never, W]:
    """Successful writer with no data, with optional log entries."""
    return ChannelWriter(Channel.empty(), Log.of(*log_entries))


def writer_error[E, W](error: E, *log_entries: W) -> ChannelWriter[E, typing.Never, W]:
    """Failed writer carrying error, with optional log entries."""
    return ChannelWriter(Channel.from_error(error), Log.of(*log_entries))


__all__ = (
    "ChannelWriter",
    "writer_value",
    "writer_empty",
    "writer_error",
)
