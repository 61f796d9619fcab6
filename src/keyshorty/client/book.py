"""Client data layer: API calls reconciled into a local ShortcutStore."""

from __future__ import annotations

import asyncio
import logging

from keyshorty.client.api_client import APIError, KeyShortyClient
from keyshorty.client.notifications import ErrorSink
from keyshorty.client.state import ShortcutStore
from keyshorty.models.application import Application
from keyshorty.models.shortcut import Shortcut

logger = logging.getLogger(__name__)


class ShortcutBook:
    """Keeps a ShortcutStore in step with the API.

    Mutations update the store from the API's response instead of refetching.
    Failed calls are published on the ErrorSink and reported through the
    return value; they never raise.
    """

    def __init__(
        self,
        client: KeyShortyClient,
        store: ShortcutStore | None = None,
        errors: ErrorSink | None = None,
    ) -> None:
        self.client = client
        self.store = store or ShortcutStore()
        self.errors = errors or ErrorSink()

    def _report(self, action: str, exc: APIError) -> None:
        logger.warning("%s failed: %s", action, exc.message)
        self.errors.notify(f"Error {action}: {exc.message}")

    async def load(self) -> bool:
        """Fetch all applications, then every application's shortcuts concurrently."""
        try:
            applications = await self.client.list_applications()
        except APIError as exc:
            self._report("fetching applications", exc)
            return False

        self.store.set_applications(applications)
        results = await asyncio.gather(*(self.refresh_shortcuts(app.id) for app in applications))
        return all(r is not None for r in results)

    async def refresh_shortcuts(self, application_id: int) -> list[Shortcut] | None:
        try:
            shortcuts = await self.client.list_shortcuts(application_id)
        except APIError as exc:
            self._report("fetching shortcuts", exc)
            return None
        self.store.set_shortcuts(application_id, shortcuts)
        return shortcuts

    async def add_application(self, name: str) -> Application | None:
        try:
            application = await self.client.create_application(name)
        except APIError as exc:
            self._report("adding application", exc)
            return None
        self.store.add_application(application)
        self.store.set_shortcuts(application.id, [])
        return application

    async def add_shortcut(
        self,
        application_id: int,
        key_combination: str,
        description: str,
    ) -> Shortcut | None:
        try:
            shortcut = await self.client.create_shortcut(application_id, key_combination, description)
        except APIError as exc:
            self._report("adding shortcut", exc)
            return None
        self.store.add_shortcut(shortcut)
        return shortcut

    async def delete_application(self, application_id: int) -> bool:
        try:
            await self.client.delete_application(application_id)
        except APIError as exc:
            self._report("deleting application", exc)
            return False
        self.store.remove_application(application_id)
        return True

    async def delete_shortcut(self, shortcut_id: int) -> bool:
        try:
            await self.client.delete_shortcut(shortcut_id)
        except APIError as exc:
            self._report("deleting shortcut", exc)
            return False
        self.store.remove_shortcut(shortcut_id)
        return True
