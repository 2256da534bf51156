"""Exercise listing. Create and delete live in the integrity module."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.models.workout import Exercise
from fitplan.schemas.exercise import ExerciseRead


async def list_exercises(db: AsyncSession, workout_id: int | None = None) -> list[ExerciseRead]:
    """List exercise entries, optionally only those of one workout (in insertion order)."""
    stmt = select(Exercise)
    if workout_id is not None:
        stmt = stmt.where(Exercise.workout_id == workout_id)
    result = await db.execute(stmt.order_by(Exercise.id))
    return [ExerciseRead.model_validate(e) for e in result.scalars().all()]
