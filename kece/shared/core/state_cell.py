"""Latest-value cell notifying subscribers on every change."""

from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeAlias, TypeVar

T = TypeVar("T")

Unsubscribe: TypeAlias = Callable[[], None]


class StateCell(Generic[T]):
    """Latest-value cell with synchronous subscriber notification.

    Only the most recent value is kept. Subscribers are called in subscription
    order on every ``set``; a failing subscriber is logged and skipped.
    """

    def __init__(self, initial: T, name: str = "state") -> None:
        self._value: T = initial
        self._subscribers: List[Callable[[T], None]] = []
        self._closed = False
        self.name = name
        self._logger = logging.getLogger(__name__)

    @property
    def value(self) -> T:
        return self._value

    @property
    def closed(self) -> bool:
        return self._closed

    def set(self, value: T) -> None:
        """Overwrite the held value and notify subscribers."""
        if self._closed:
            self._logger.debug(f"Dropping update to closed cell '{self.name}': {value!r}")
            return
        self._value = value
        handlers = list(self._subscribers)
        self._logger.debug(f"Cell '{self.name}' -> {value!r} ({len(handlers)} subscriber(s))")
        for handler in handlers:
            self._safe_dispatch(handler, value)

    def subscribe(self, handler: Callable[[T], None], replay: bool = True) -> Unsubscribe:
        """Register a handler and return a callable that removes it.

        With ``replay`` the handler immediately receives the current value.
        """
        if self._closed:
            raise RuntimeError(f"Cell '{self.name}' is closed")
        if handler not in self._subscribers:
            self._subscribers.append(handler)
        if replay:
            self._safe_dispatch(handler, self._value)
        return lambda: self.unsubscribe(handler)

    def unsubscribe(self, handler: Callable[[T], None]) -> None:
        if handler in self._subscribers:
            self._subscribers.remove(handler)

    def close(self) -> None:
        """Drop all subscribers and ignore further updates."""
        self._closed = True
        self._subscribers.clear()

    def _safe_dispatch(self, handler: Callable[[T], None], value: T) -> None:
        """Dispatch wrapper to keep one subscriber failure from stopping the others."""
        handler_name = getattr(handler, "__name__", str(handler))
        try:
            handler(value)
        except Exception as exc:
            self._logger.exception(
                f"Subscriber error in '{handler_name}' for cell '{self.name}'",
                exc_info=exc,
            )
