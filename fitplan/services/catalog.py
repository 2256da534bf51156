"""Catalog browsing and adding catalog exercises to workouts."""

from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.core.constants import (
    ALL_MUSCLE_GROUPS,
    DEFAULT_REPS,
    DEFAULT_REST_TIME_SECONDS,
    DEFAULT_SETS,
)
from fitplan.schemas.catalog import CatalogEntryRead
from fitplan.schemas.exercise import ExerciseCreate, ExerciseRead
from fitplan.store.catalog import list_catalog, list_muscle_groups
from fitplan.store.integrity import create_exercise


async def muscle_group_options(db: AsyncSession) -> list[str]:
    """Filter choices: "All" followed by every muscle group in the catalog."""
    return [ALL_MUSCLE_GROUPS, *await list_muscle_groups(db)]


async def browse_catalog(
    db: AsyncSession,
    search_text: str = "",
    muscle_group: str = ALL_MUSCLE_GROUPS,
) -> list[CatalogEntryRead]:
    """Catalog filtered by name search and muscle group; blank search / "All" do not filter."""
    return await list_catalog(
        db,
        muscle_group=None if muscle_group == ALL_MUSCLE_GROUPS else muscle_group,
        search=search_text.strip() or None,
    )


async def add_to_workout(
    db: AsyncSession,
    workout_id: int,
    catalog_id: int,
    sets: int = DEFAULT_SETS,
    reps: int = DEFAULT_REPS,
    rest_time_seconds: int = DEFAULT_REST_TIME_SECONDS,
) -> ExerciseRead:
    payload = ExerciseCreate(
        workout_id=workout_id,
        catalog_entry_id=catalog_id,
        sets=sets,
        reps=reps,
        rest_time_seconds=rest_time_seconds,
    )
    return await create_exercise(db, payload)
