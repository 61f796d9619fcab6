"""Client side of KeyShorty: API client, local state store and terminal UI."""

from keyshorty.client.api_client import APIError, KeyShortyClient
from keyshorty.client.book import ShortcutBook
from keyshorty.client.notifications import ErrorSink, Notification
from keyshorty.client.state import ShortcutStore

__all__ = [
    "APIError",
    "ErrorSink",
    "KeyShortyClient",
    "Notification",
    "ShortcutBook",
    "ShortcutStore",
]
