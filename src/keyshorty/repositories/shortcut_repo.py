"""Shortcut repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from keyshorty.db.models.shortcut import ShortcutRow
from keyshorty.repositories.base import BaseRepository


class ShortcutRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ShortcutRow)

    async def get(self, shortcut_id: int) -> ShortcutRow | None:
        return await self.get_by_id(shortcut_id)

    async def list_for_application(self, application_id: int) -> list[ShortcutRow]:
        return await self.list_by_field("application_id", application_id)

    async def create(
        self,
        application_id: int,
        key_combination: str,
        description: str,
    ) -> ShortcutRow:
        return await super().create(
            application_id=application_id,
            key_combination=key_combination,
            description=description,
        )

    async def delete(self, shortcut_id: int) -> bool:
        return await self.delete_by_field("id", shortcut_id) > 0

    async def delete_for_application(self, application_id: int) -> int:
        return await self.delete_by_field("application_id", application_id)
