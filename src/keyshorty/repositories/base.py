"""Base repository with common CRUD operations."""

from typing import Any, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from keyshorty.db.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository:
    """Generic async repository for SQLAlchemy models with an integer ``id`` key."""

    def __init__(self, session: AsyncSession, model_class: type[T]):
        self.session = session
        self.model_class = model_class

    async def get_by_id(self, pk_value: int) -> T | None:
        """Get a single record by primary key."""
        stmt = select(self.model_class).where(self.model_class.id == pk_value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[T]:
        """List every record in insertion order."""
        stmt = select(self.model_class).order_by(self.model_class.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_field(self, field: str, value: Any) -> list[T]:
        """List records matching a field value, in insertion order."""
        stmt = (
            select(self.model_class)
            .where(getattr(self.model_class, field) == value)
            .order_by(self.model_class.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **kwargs: Any) -> T:
        """Create and flush a new record so its generated id is populated."""
        row = self.model_class(**kwargs)
        self.session.add(row)
        await self.session.flush()
        return row

    async def delete_by_field(self, field: str, value: Any) -> int:
        """Delete records matching a field value. Returns the number of rows removed."""
        stmt = delete(self.model_class).where(getattr(self.model_class, field) == value)
        result = await self.session.execute(stmt)
        return result.rowcount
