"""
CodeMate Backend — Shared CRUD Helpers
========================================

What:  The two steps every "update" operation shares: locate the row by id
       (404 if missing) and apply a partial update.
"""

from typing import Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import NotFoundError
from app.models.base import next_update_timestamp

ModelT = TypeVar("ModelT", bound=Base)


async def get_or_raise(
    db: AsyncSession, model: Type[ModelT], row_id: int, resource: str
) -> ModelT:
    row = await db.get(model, row_id)
    if row is None:
        raise NotFoundError(resource=resource, resource_id=row_id)
    return row


def apply_partial_update(row, payload: BaseModel) -> dict:
    """
    Copy the fields the client actually sent onto `row` and advance updated_at.

    Fields absent from the request body are left untouched; fields sent as
    null overwrite the column with NULL. updated_at moves even when the
    payload is empty. Returns the applied changes for logging.
    """
    changes = payload.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(row, field, value)
    row.updated_at = next_update_timestamp(row.updated_at)
    return changes
