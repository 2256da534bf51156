"""Shared lookups for store functions."""

from __future__ import annotations

from typing import TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.core.exceptions import ForeignKeyError, NotFoundError
from fitplan.db.base import Base

T = TypeVar("T", bound=Base)


async def require_row(db: AsyncSession, model: type[T], row_id: int) -> T:
    """Load a row by primary key or raise NotFoundError."""
    result = await db.execute(select(model).where(model.id == row_id))
    row = result.scalar_one_or_none()
    if row is None:
        raise NotFoundError(model.__name__, row_id)
    return row


async def require_parent(
    db: AsyncSession, entity: str, field: str, model: type[Base], row_id: int
) -> None:
    """Raise ForeignKeyError unless ``model`` has a row with this id."""
    result = await db.execute(select(func.count()).select_from(model).where(model.id == row_id))
    if not result.scalar_one():
        raise ForeignKeyError(entity, field, row_id)
