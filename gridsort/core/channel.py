"""Broadcast channel that replays its latest value to new subscribers."""

from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class ChannelClosedError(RuntimeError):
    """Raised when emitting on a channel that has been completed."""

    pass


def _noop() -> None:
    return None


class LatestValueChannel(Generic[T]):
    """
    Synchronous fan-out channel holding the most recently emitted value.

    Subscribers receive the current value as soon as they subscribe and
    every later value in emission order. Once completed, the channel keeps
    its last value readable but accepts no further emissions.

    Example:
        channel = LatestValueChannel([])
        unsubscribe = channel.subscribe(print)  # prints []
        channel.emit(["a"])                     # prints ['a']
        unsubscribe()
    """

    def __init__(self, initial: T):
        self._value = initial
        self._subscribers: List[Tuple[Callable[[T], Any], Optional[Callable[[], Any]]]] = []
        self._closed = False

    @property
    def value(self) -> T:
        """The latest emitted value (or the initial one)."""
        return self._value

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(
        self,
        callback: Callable[[T], Any],
        on_complete: Optional[Callable[[], Any]] = None,
    ) -> Callable[[], None]:
        """
        Register a callback for current and future values.

        Args:
            callback: Called with the latest value immediately, then with
                every emitted value
            on_complete: Called once when the channel completes

        Returns:
            A callable that removes the subscription
        """
        if self._closed:
            if on_complete is not None:
                on_complete()
            return _noop

        entry = (callback, on_complete)
        self._subscribers.append(entry)
        callback(self._value)

        def unsubscribe() -> None:
            if entry in self._subscribers:
                self._subscribers.remove(entry)

        return unsubscribe

    def emit(self, value: T) -> None:
        """Store a value and push it to every subscriber in order."""
        if self._closed:
            raise ChannelClosedError("Cannot emit on a completed channel")
        self._value = value
        # Copy so callbacks may unsubscribe while being notified
        for callback, _ in list(self._subscribers):
            callback(value)

    def complete(self) -> None:
        """Close the channel and notify completion handlers. Idempotent."""
        if self._closed:
            return
        self._closed = True
        subscribers, self._subscribers = self._subscribers, []
        for _, on_complete in subscribers:
            if on_complete is not None:
                on_complete()

    def __repr__(self) -> str:
        return (
            f"LatestValueChannel(value={self._value!r}, "
            f"subscribers={len(self._subscribers)}, closed={self._closed})"
        )
