import pytest
from pydantic import ValidationError

from fitplan.core.exceptions import ForeignKeyError, NotFoundError
from fitplan.schemas import (
    ExerciseCreate,
    WorkoutCreate,
    WorkoutPlanCreate,
    WorkoutPlanUpdate,
    WorkoutUpdate,
)
from fitplan.store import (
    count_workouts,
    create_plan,
    create_workout,
    get_plan,
    get_workout,
    get_workout_detail,
    list_catalog,
    list_exercises,
    list_muscle_groups,
    list_plans,
    list_workouts,
    update_plan,
    update_workout,
)
from fitplan.services.seeder import seed_if_empty


@pytest.mark.asyncio
async def test_plan_defaults_and_crud(db):
    default = await create_plan(db)
    named = await create_plan(db, WorkoutPlanCreate(name="  Summer cut  "))

    assert default.name == "Workout plan"
    assert named.name == "Summer cut"
    assert await get_plan(db, named.id) == named
    assert [p.id for p in await list_plans(db)] == [default.id, named.id]
    assert [p.id for p in await list_plans(db, skip=1, limit=1)] == [named.id]

    renamed = await update_plan(db, named.id, WorkoutPlanUpdate(name="Winter bulk"))
    assert renamed.name == "Winter bulk"
    assert (await get_plan(db, named.id)).name == "Winter bulk"


@pytest.mark.asyncio
async def test_update_plan_without_changes_keeps_name(db):
    plan = await create_plan(db, WorkoutPlanCreate(name="Keep"))
    assert (await update_plan(db, plan.id, WorkoutPlanUpdate())).name == "Keep"


@pytest.mark.asyncio
async def test_missing_plan_lookups_raise(db):
    with pytest.raises(NotFoundError):
        await get_plan(db, 1)
    with pytest.raises(NotFoundError):
        await update_plan(db, 1, WorkoutPlanUpdate(name="x"))


def test_plan_name_validation():
    with pytest.raises(ValidationError):
        WorkoutPlanCreate(name="   ")
    with pytest.raises(ValidationError):
        WorkoutPlanCreate(name="x" * 51)


@pytest.mark.asyncio
async def test_workout_crud_and_plan_filter(db):
    plan_a = await create_plan(db, WorkoutPlanCreate(name="A"))
    plan_b = await create_plan(db, WorkoutPlanCreate(name="B"))
    push = await create_workout(db, WorkoutCreate(title="Push", workout_plan_id=plan_a.id))
    pull = await create_workout(db, WorkoutCreate(title="Pull", workout_plan_id=plan_a.id))
    default = await create_workout(db, WorkoutCreate(workout_plan_id=plan_b.id))

    assert default.title == "Workout"
    assert await list_workouts(db, plan_id=plan_a.id) == [push, pull]
    assert await list_workouts(db, plan_id=plan_b.id) == [default]
    assert len(await list_workouts(db)) == 3
    assert await count_workouts(db, plan_a.id) == 2

    renamed = await update_workout(db, pull.id, WorkoutUpdate(title="Pull day"))
    assert renamed.title == "Pull day"
    assert (await get_workout(db, pull.id)).title == "Pull day"


@pytest.mark.asyncio
async def test_create_workout_in_missing_plan_raises(db):
    with pytest.raises(ForeignKeyError) as exc_info:
        await create_workout(db, WorkoutCreate(title="Orphan", workout_plan_id=7))
    assert exc_info.value.field == "workout_plan_id"
    assert await list_workouts(db) == []


@pytest.mark.asyncio
async def test_missing_workout_lookups_raise(db):
    with pytest.raises(NotFoundError):
        await get_workout(db, 3)
    with pytest.raises(NotFoundError):
        await get_workout_detail(db, 3)
    with pytest.raises(NotFoundError):
        await update_workout(db, 3, WorkoutUpdate(title="x"))


@pytest.mark.asyncio
async def test_workout_detail_includes_catalog_entries(db, catalog, make_plan):
    _, (workout_id,) = await make_plan(catalog["Squats"].id, workouts=1, exercises_per_workout=2)

    detail = await get_workout_detail(db, workout_id)

    assert detail.id == workout_id
    assert len(detail.exercises) == 2
    assert {e.catalog_entry.name for e in detail.exercises} == {"Squats"}
    assert detail.exercises[0].catalog_entry.image == catalog["Squats"].image


@pytest.mark.asyncio
async def test_list_exercises_filters_by_workout(db, catalog, make_plan):
    _, (first, second) = await make_plan(catalog["Push-ups"].id, workouts=2, exercises_per_workout=1)

    assert [e.workout_id for e in await list_exercises(db, workout_id=second)] == [second]
    assert len(await list_exercises(db)) == 2


@pytest.mark.parametrize("field", ["sets", "reps", "rest_time_seconds"])
def test_exercise_parameters_must_be_non_negative(field):
    values = {"workout_id": 1, "catalog_entry_id": 1, field: -1}
    with pytest.raises(ValidationError):
        ExerciseCreate(**values)


def test_exercise_parameters_have_no_upper_bound():
    exercise = ExerciseCreate(workout_id=1, catalog_entry_id=1, sets=1000, reps=10_000, rest_time_seconds=86_400)
    assert exercise.rest_time_seconds == 86_400


@pytest.mark.asyncio
async def test_catalog_filters(db):
    await seed_if_empty(
        db,
        '[{"name": "Bench Press", "muscleGroup": "Chest"},'
        ' {"name": "Incline Bench Press", "muscleGroup": "Chest"},'
        ' {"name": "Squats", "muscleGroup": "Legs"},'
        ' {"name": "100%_effort", "muscleGroup": "Core"}]',
    )

    assert [c.name for c in await list_catalog(db, muscle_group="Chest")] == [
        "Bench Press",
        "Incline Bench Press",
    ]
    assert [c.name for c in await list_catalog(db, search="bench")] == [
        "Bench Press",
        "Incline Bench Press",
    ]
    assert [c.name for c in await list_catalog(db, muscle_group="Legs", search="SQU")] == ["Squats"]
    assert await list_catalog(db, muscle_group="Chest", search="squat") == []
    # LIKE wildcards in the search text are literal
    assert [c.name for c in await list_catalog(db, search="%_")] == ["100%_effort"]
    assert len(await list_catalog(db)) == 4
    assert await list_muscle_groups(db) == ["Chest", "Core", "Legs"]
