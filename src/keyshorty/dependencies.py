"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from keyshorty.models.common import MAX_ROW_ID, MIN_ROW_ID


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


# Type aliases for dependency injection
DBSession = Annotated[AsyncSession, Depends(get_db)]
RowId = Annotated[int, Path(ge=MIN_ROW_ID, le=MAX_ROW_ID)]
