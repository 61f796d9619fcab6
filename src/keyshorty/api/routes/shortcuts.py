"""Shortcut API routes."""

import logging

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from keyshorty.dependencies import DBSession, RowId
from keyshorty.errors.exceptions import ConstraintError, NotFoundError
from keyshorty.errors.handlers import storage_error_message
from keyshorty.models.common import SuccessResponse
from keyshorty.models.shortcut import Shortcut, ShortcutCreate
from keyshorty.repositories.shortcut_repo import ShortcutRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Shortcuts"])


@router.post("/shortcuts")
async def create_shortcut(body: ShortcutCreate, db: DBSession) -> Shortcut:
    repo = ShortcutRepository(db)
    try:
        row = await repo.create(
            application_id=body.application_id,
            key_combination=body.key_combination,
            description=body.description,
        )
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        raise ConstraintError(storage_error_message(exc)) from exc

    logger.info(
        "shortcut_created",
        extra={"shortcut_id": row.id, "application_id": row.application_id},
    )
    return Shortcut.model_validate(row)


@router.delete("/shortcuts/{shortcut_id}")
async def delete_shortcut(shortcut_id: RowId, db: DBSession) -> SuccessResponse:
    repo = ShortcutRepository(db)
    try:
        found = await repo.delete(shortcut_id)
        if not found:
            await db.rollback()
            raise NotFoundError("Shortcut")
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        raise ConstraintError(storage_error_message(exc)) from exc

    logger.info("shortcut_deleted", extra={"shortcut_id": shortcut_id})
    return SuccessResponse()
