"""Read access to the exercise catalog."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.models.catalog import CatalogEntry
from fitplan.schemas.catalog import CatalogEntryRead
from fitplan.store.base import require_row


async def get_catalog_entry(db: AsyncSession, catalog_id: int) -> CatalogEntryRead:
    return CatalogEntryRead.model_validate(await require_row(db, CatalogEntry, catalog_id))


async def list_catalog(
    db: AsyncSession,
    muscle_group: str | None = None,
    search: str | None = None,
) -> list[CatalogEntryRead]:
    """
    List catalog entries in seed order.
    ``muscle_group`` matches the tag exactly; ``search`` is a case-insensitive substring of
    the name.
    """
    stmt = select(CatalogEntry)
    if muscle_group is not None:
        stmt = stmt.where(CatalogEntry.muscle_group == muscle_group)
    if search:
        stmt = stmt.where(CatalogEntry.name.icontains(search, autoescape=True))
    result = await db.execute(stmt.order_by(CatalogEntry.id))
    return [CatalogEntryRead.model_validate(c) for c in result.scalars().all()]


async def count_catalog(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(CatalogEntry.id)))
    return result.scalar_one()


async def list_muscle_groups(db: AsyncSession) -> list[str]:
    """Distinct muscle-group tags, sorted."""
    result = await db.execute(
        select(CatalogEntry.muscle_group).distinct().order_by(CatalogEntry.muscle_group)
    )
    return list(result.scalars().all())
