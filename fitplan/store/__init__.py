"""Plain CRUD surface over the local store. Every function takes an AsyncSession."""

from fitplan.store.catalog import count_catalog, get_catalog_entry, list_catalog, list_muscle_groups
from fitplan.store.exercises import list_exercises
from fitplan.store.integrity import (
    create_exercise,
    delete_catalog_entry,
    delete_exercise,
    delete_plan,
    delete_workout,
)
from fitplan.store.plans import create_plan, get_plan, list_plans, update_plan
from fitplan.store.workouts import (
    count_workouts,
    create_workout,
    get_workout,
    get_workout_detail,
    list_workouts,
    update_workout,
)

__all__ = [
    "count_catalog",
    "count_workouts",
    "create_exercise",
    "create_plan",
    "create_workout",
    "delete_catalog_entry",
    "delete_exercise",
    "delete_plan",
    "delete_workout",
    "get_catalog_entry",
    "get_plan",
    "get_workout",
    "get_workout_detail",
    "list_catalog",
    "list_exercises",
    "list_muscle_groups",
    "list_plans",
    "list_workouts",
    "update_plan",
    "update_workout",
]
