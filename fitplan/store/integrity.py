"""
Relationship rules between plans, workouts, exercises and catalog entries.

    WorkoutPlan --(cascade)--> Workout --(cascade)--> Exercise --(restrict)--> CatalogEntry

Plans and workouts exclusively own their children, so deleting them removes the
children in the same transaction. Catalog entries are shared reference data: they
cannot be deleted while any exercise still points at them.

The rules are applied here with explicit statements; the foreign keys carry the same
ON DELETE policies so raw SQL cannot orphan rows either.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.core.exceptions import ReferentialIntegrityError
from fitplan.models.catalog import CatalogEntry
from fitplan.models.plan import WorkoutPlan
from fitplan.models.workout import Exercise, Workout
from fitplan.schemas.exercise import ExerciseCreate, ExerciseRead
from fitplan.store.base import require_parent, require_row

logger = logging.getLogger(__name__)


async def delete_plan(db: AsyncSession, plan_id: int) -> None:
    """Delete a plan with all its workouts and their exercises."""
    await require_row(db, WorkoutPlan, plan_id)

    workout_ids = select(Workout.id).where(Workout.workout_plan_id == plan_id)
    exercises = await db.execute(delete(Exercise).where(Exercise.workout_id.in_(workout_ids)))
    workouts = await db.execute(delete(Workout).where(Workout.workout_plan_id == plan_id))
    await db.execute(delete(WorkoutPlan).where(WorkoutPlan.id == plan_id))
    await db.flush()
    logger.info(
        "Deleted plan %s (%s workouts, %s exercises)",
        plan_id,
        workouts.rowcount,
        exercises.rowcount,
    )


async def delete_workout(db: AsyncSession, workout_id: int) -> None:
    """Delete a workout and its exercises."""
    await require_row(db, Workout, workout_id)

    exercises = await db.execute(delete(Exercise).where(Exercise.workout_id == workout_id))
    await db.execute(delete(Workout).where(Workout.id == workout_id))
    await db.flush()
    logger.info("Deleted workout %s (%s exercises)", workout_id, exercises.rowcount)


async def delete_exercise(db: AsyncSession, exercise_id: int) -> None:
    await require_row(db, Exercise, exercise_id)
    await db.execute(delete(Exercise).where(Exercise.id == exercise_id))
    await db.flush()
    logger.info("Deleted exercise %s", exercise_id)


async def delete_catalog_entry(db: AsyncSession, catalog_id: int) -> None:
    """Delete a catalog entry; refused while any exercise references it."""
    await require_row(db, CatalogEntry, catalog_id)

    result = await db.execute(
        select(func.count(Exercise.id)).where(Exercise.catalog_entry_id == catalog_id)
    )
    dependents = result.scalar_one()
    if dependents:
        logger.warning(
            "Refusing to delete catalog entry %s: %s exercise(s) reference it",
            catalog_id,
            dependents,
        )
        raise ReferentialIntegrityError("CatalogEntry", catalog_id, dependents)

    try:
        await db.execute(delete(CatalogEntry).where(CatalogEntry.id == catalog_id))
        await db.flush()
    except IntegrityError as e:
        # An exercise was attached after the count above
        raise ReferentialIntegrityError("CatalogEntry", catalog_id, 1) from e
    logger.info("Deleted catalog entry %s", catalog_id)


async def create_exercise(db: AsyncSession, payload: ExerciseCreate) -> ExerciseRead:
    """Attach a catalog entry to a workout. Both references must exist."""
    await require_parent(db, "Exercise", "workout_id", Workout, payload.workout_id)
    await require_parent(db, "Exercise", "catalog_entry_id", CatalogEntry, payload.catalog_entry_id)

    exercise = Exercise(**payload.model_dump())
    db.add(exercise)
    await db.flush()
    logger.info(
        "Added catalog entry %s to workout %s as exercise %s",
        payload.catalog_entry_id,
        payload.workout_id,
        exercise.id,
    )
    return ExerciseRead.model_validate(exercise)
