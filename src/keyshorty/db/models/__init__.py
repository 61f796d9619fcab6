"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from keyshorty.db.models.application import ApplicationRow
from keyshorty.db.models.shortcut import ShortcutRow

__all__ = [
    "ApplicationRow",
    "ShortcutRow",
]
