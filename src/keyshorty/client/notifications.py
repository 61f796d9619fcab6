"""Error-notification channel shared by the data layer and the presentation layer."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from keyshorty.config import settings


@dataclass
class Notification:
    """A transient error message that dismisses itself after ``timeout`` seconds."""

    message: str
    timeout: float
    created_at: float = field(default_factory=time.monotonic)

    def expired(self, now: float | None = None) -> bool:
        now = time.monotonic() if now is None else now
        return now - self.created_at >= self.timeout


Subscriber = Callable[[Notification], None]


class ErrorSink:
    """Observer registry for error notifications.

    Holds at most one visible notification; a newer one replaces it.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = settings.notification_timeout if timeout is None else timeout
        self._subscribers: list[Subscriber] = []
        self._current: Notification | None = None

    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        self._subscribers = [s for s in self._subscribers if s is not callback]

    def notify(self, message: str) -> Notification:
        """Publish a message to every subscriber and make it the current notification."""
        notification = Notification(message=message, timeout=self.timeout)
        self._current = notification
        for callback in list(self._subscribers):
            callback(notification)
        return notification

    def clear(self) -> None:
        self._current = None

    @property
    def current(self) -> Notification | None:
        """The visible notification, or None once it has been dismissed or expired."""
        if self._current is not None and self._current.expired():
            self._current = None
        return self._current
