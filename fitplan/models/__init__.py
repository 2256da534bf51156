"""ORM models - import all so Base.metadata is complete for migrations."""

from fitplan.models.catalog import CatalogEntry
from fitplan.models.plan import WorkoutPlan
from fitplan.models.workout import Exercise, Workout

__all__ = [
    "CatalogEntry",
    "Exercise",
    "Workout",
    "WorkoutPlan",
]
