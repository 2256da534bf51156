"""Plain records returned by the store and payloads accepted by it."""

from fitplan.schemas.catalog import CatalogEntryRead, CatalogSeedRecord
from fitplan.schemas.exercise import ExerciseCreate, ExerciseDetail, ExerciseRead
from fitplan.schemas.plan import WorkoutPlanCreate, WorkoutPlanRead, WorkoutPlanUpdate
from fitplan.schemas.workout import WorkoutCreate, WorkoutDetail, WorkoutRead, WorkoutUpdate

__all__ = [
    "CatalogEntryRead",
    "CatalogSeedRecord",
    "ExerciseCreate",
    "ExerciseDetail",
    "ExerciseRead",
    "WorkoutCreate",
    "WorkoutDetail",
    "WorkoutPlanCreate",
    "WorkoutPlanRead",
    "WorkoutPlanUpdate",
    "WorkoutRead",
    "WorkoutUpdate",
]
