"""Application repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from keyshorty.db.models.application import ApplicationRow
from keyshorty.repositories.base import BaseRepository
from keyshorty.repositories.shortcut_repo import ShortcutRepository


class ApplicationRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ApplicationRow)

    async def get(self, application_id: int) -> ApplicationRow | None:
        return await self.get_by_id(application_id)

    async def create(self, name: str) -> ApplicationRow:
        return await super().create(name=name)

    async def delete_with_shortcuts(self, application_id: int) -> bool:
        """Delete an application and all of its shortcuts.

        Both statements run on the caller's session; the caller commits or
        rolls back, so the pair is applied atomically. Returns False when no
        application row matched.
        """
        await ShortcutRepository(self.session).delete_for_application(application_id)
        removed = await self.delete_by_field("id", application_id)
        return removed > 0
