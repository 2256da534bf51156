"""Workout CRUD, scoped to the owning plan."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fitplan.core.exceptions import NotFoundError
from fitplan.models.plan import WorkoutPlan
from fitplan.models.workout import Exercise, Workout
from fitplan.schemas.workout import WorkoutCreate, WorkoutDetail, WorkoutRead, WorkoutUpdate
from fitplan.store.base import require_parent, require_row

logger = logging.getLogger(__name__)


async def create_workout(db: AsyncSession, payload: WorkoutCreate) -> WorkoutRead:
    """Add a workout to an existing plan."""
    await require_parent(db, "Workout", "workout_plan_id", WorkoutPlan, payload.workout_plan_id)
    workout = Workout(**payload.model_dump())
    db.add(workout)
    await db.flush()
    logger.info("Created workout %s (%r) in plan %s", workout.id, workout.title, workout.workout_plan_id)
    return WorkoutRead.model_validate(workout)


async def get_workout(db: AsyncSession, workout_id: int) -> WorkoutRead:
    return WorkoutRead.model_validate(await require_row(db, Workout, workout_id))


async def get_workout_detail(db: AsyncSession, workout_id: int) -> WorkoutDetail:
    """Workout with its exercises and their catalog entries."""
    result = await db.execute(
        select(Workout)
        .options(selectinload(Workout.exercises).selectinload(Exercise.catalog_entry))
        .where(Workout.id == workout_id)
        .execution_options(populate_existing=True)
    )
    workout = result.scalar_one_or_none()
    if workout is None:
        raise NotFoundError("Workout", workout_id)
    return WorkoutDetail.model_validate(workout)


async def list_workouts(db: AsyncSession, plan_id: int | None = None) -> list[WorkoutRead]:
    """List workouts, optionally only those of one plan."""
    stmt = select(Workout)
    if plan_id is not None:
        stmt = stmt.where(Workout.workout_plan_id == plan_id)
    result = await db.execute(stmt.order_by(Workout.id))
    return [WorkoutRead.model_validate(w) for w in result.scalars().all()]


async def count_workouts(db: AsyncSession, plan_id: int) -> int:
    result = await db.execute(
        select(func.count(Workout.id)).where(Workout.workout_plan_id == plan_id)
    )
    return result.scalar_one()


async def update_workout(db: AsyncSession, workout_id: int, payload: WorkoutUpdate) -> WorkoutRead:
    """Rename a workout."""
    workout = await require_row(db, Workout, workout_id)
    for k, v in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(workout, k, v)
    await db.flush()
    return WorkoutRead.model_validate(workout)
