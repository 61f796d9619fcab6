"""Local mirror of the server's applications and shortcuts."""

from dataclasses import dataclass, field

from keyshorty.models.application import Application
from keyshorty.models.shortcut import Shortcut


@dataclass
class ShortcutStore:
    """Applications in display order plus each application's shortcuts.

    All mutation goes through the update methods below; callers read
    ``applications`` and ``shortcuts_for``.
    """

    applications: list[Application] = field(default_factory=list)
    shortcuts: dict[int, list[Shortcut]] = field(default_factory=dict)

    def set_applications(self, applications: list[Application]) -> None:
        self.applications = list(applications)
        known = {app.id for app in self.applications}
        self.shortcuts = {k: v for k, v in self.shortcuts.items() if k in known}

    def add_application(self, application: Application) -> None:
        self.applications.append(application)

    def remove_application(self, application_id: int) -> None:
        self.applications = [a for a in self.applications if a.id != application_id]
        self.shortcuts.pop(application_id, None)

    def get_application(self, application_id: int) -> Application | None:
        for app in self.applications:
            if app.id == application_id:
                return app
        return None

    def set_shortcuts(self, application_id: int, shortcuts: list[Shortcut]) -> None:
        self.shortcuts[application_id] = list(shortcuts)

    def add_shortcut(self, shortcut: Shortcut) -> None:
        self.shortcuts.setdefault(shortcut.application_id, []).append(shortcut)

    def remove_shortcut(self, shortcut_id: int) -> None:
        for app_id, items in self.shortcuts.items():
            self.shortcuts[app_id] = [s for s in items if s.id != shortcut_id]

    def find_shortcut(self, shortcut_id: int) -> Shortcut | None:
        for items in self.shortcuts.values():
            for shortcut in items:
                if shortcut.id == shortcut_id:
                    return shortcut
        return None

    def shortcuts_for(self, application_id: int) -> list[Shortcut]:
        return list(self.shortcuts.get(application_id, []))
