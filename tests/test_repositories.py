"""Repository-level tests: storage constraints and the transactional cascading delete."""

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from keyshorty.db.models.application import ApplicationRow
from keyshorty.repositories.application_repo import ApplicationRepository
from keyshorty.repositories.shortcut_repo import ShortcutRepository


async def _seed(db_session, name: str = "Word", shortcuts: int = 2) -> int:
    app = await ApplicationRepository(db_session).create(name=name)
    repo = ShortcutRepository(db_session)
    for i in range(shortcuts):
        await repo.create(app.id, f"Ctrl+{i}", f"Action {i}")
    await db_session.commit()
    return app.id


@pytest.mark.asyncio
async def test_create_assigns_ids(db_session):
    app_id = await _seed(db_session, shortcuts=1)
    rows = await ShortcutRepository(db_session).list_for_application(app_id)
    assert len(rows) == 1
    assert rows[0].id is not None
    assert rows[0].application_id == app_id


@pytest.mark.asyncio
async def test_unique_name_enforced_by_storage(db_session):
    await _seed(db_session, name="Excel", shortcuts=0)
    with pytest.raises(IntegrityError):
        await ApplicationRepository(db_session).create(name="Excel")
    await db_session.rollback()


@pytest.mark.asyncio
async def test_foreign_key_enforced_by_storage(db_session):
    with pytest.raises(IntegrityError):
        await ShortcutRepository(db_session).create(12345, "Alt+F4", "Close")
    await db_session.rollback()


@pytest.mark.asyncio
async def test_delete_with_shortcuts(db_session):
    app_id = await _seed(db_session)
    repo = ApplicationRepository(db_session)

    assert await repo.delete_with_shortcuts(app_id) is True
    await db_session.commit()

    assert await repo.get(app_id) is None
    assert await ShortcutRepository(db_session).list_for_application(app_id) == []


@pytest.mark.asyncio
async def test_delete_with_shortcuts_missing_application(db_session):
    assert await ApplicationRepository(db_session).delete_with_shortcuts(999) is False


@pytest.mark.asyncio
async def test_delete_with_shortcuts_is_one_transaction(db_session):
    """Rolling back after the delete restores both the application and its shortcuts."""
    app_id = await _seed(db_session, shortcuts=3)
    repo = ApplicationRepository(db_session)

    assert await repo.delete_with_shortcuts(app_id) is True
    await db_session.rollback()

    assert await repo.get(app_id) is not None
    assert len(await ShortcutRepository(db_session).list_for_application(app_id)) == 3


@pytest.mark.asyncio
async def test_storage_cascade_on_application_delete(db_session):
    """Deleting the application row alone also removes its shortcuts (ON DELETE CASCADE)."""
    app_id = await _seed(db_session, shortcuts=2)
    await db_session.execute(delete(ApplicationRow).where(ApplicationRow.id == app_id))
    await db_session.commit()

    assert await ShortcutRepository(db_session).list_for_application(app_id) == []


@pytest.mark.asyncio
async def test_shortcut_delete(db_session):
    app_id = await _seed(db_session, shortcuts=2)
    repo = ShortcutRepository(db_session)
    first, second = await repo.list_for_application(app_id)

    assert await repo.delete(first.id) is True
    assert await repo.delete(first.id) is False
    await db_session.commit()

    assert [s.id for s in await repo.list_for_application(app_id)] == [second.id]
