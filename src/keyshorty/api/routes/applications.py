"""Application API routes."""

import logging

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from keyshorty.dependencies import DBSession, RowId
from keyshorty.errors.exceptions import ConstraintError, NotFoundError
from keyshorty.errors.handlers import storage_error_message
from keyshorty.models.application import Application, ApplicationCreate
from keyshorty.models.common import SuccessResponse
from keyshorty.models.shortcut import Shortcut
from keyshorty.repositories.application_repo import ApplicationRepository
from keyshorty.repositories.shortcut_repo import ShortcutRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Applications"])


@router.get("/applications")
async def list_applications(db: DBSession) -> list[Application]:
    rows = await ApplicationRepository(db).list_all()
    return [Application.model_validate(row) for row in rows]


@router.post("/applications")
async def create_application(body: ApplicationCreate, db: DBSession) -> Application:
    repo = ApplicationRepository(db)
    try:
        row = await repo.create(name=body.name)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        raise ConstraintError(storage_error_message(exc)) from exc

    logger.info("application_created", extra={"application_id": row.id, "application_name": row.name})
    return Application.model_validate(row)


@router.get("/applications/{application_id}/shortcuts")
async def list_application_shortcuts(application_id: RowId, db: DBSession) -> list[Shortcut]:
    rows = await ShortcutRepository(db).list_for_application(application_id)
    return [Shortcut.model_validate(row) for row in rows]


@router.delete("/applications/{application_id}")
async def delete_application(application_id: RowId, db: DBSession) -> SuccessResponse:
    """Delete an application together with its shortcuts in one transaction."""
    repo = ApplicationRepository(db)
    try:
        found = await repo.delete_with_shortcuts(application_id)
        if not found:
            await db.rollback()
            raise NotFoundError("Application")
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        raise ConstraintError(storage_error_message(exc)) from exc

    logger.info("application_deleted", extra={"application_id": application_id})
    return SuccessResponse()
