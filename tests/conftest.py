import base64

import pytest

from fitplan.db.session import create_engine_for, create_session_maker, init_db
from fitplan.schemas import ExerciseCreate, WorkoutCreate, WorkoutPlanCreate
from fitplan.services.seeder import seed_if_empty
from fitplan.store import create_exercise, create_plan, create_workout, list_catalog

SQUATS_IMAGE = b"\x89P"

SAMPLE_SEED = (
    '[{"name": "Push-ups", "muscleGroup": "Chest", "image": ""},'
    ' {"name": "Squats", "muscleGroup": "Legs", "image": "%s"}]'
    % base64.b64encode(SQUATS_IMAGE).decode()
)


@pytest.fixture
async def engine(tmp_path):
    engine = create_engine_for(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return create_session_maker(engine)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def catalog(db):
    """Two catalog entries: Push-ups (Chest) and Squats (Legs)."""
    await seed_if_empty(db, SAMPLE_SEED)
    return {entry.name: entry for entry in await list_catalog(db)}


@pytest.fixture
def make_plan(db):
    """Factory: plan with ``workouts`` workouts, each holding ``exercises_per_workout`` exercises."""

    async def build_plan(catalog_id, workouts=1, exercises_per_workout=1, name="Plan"):
        plan = await create_plan(db, WorkoutPlanCreate(name=name))
        workout_ids = []
        for w in range(workouts):
            workout = await create_workout(
                db, WorkoutCreate(title=f"Workout {w + 1}", workout_plan_id=plan.id)
            )
            workout_ids.append(workout.id)
            for _ in range(exercises_per_workout):
                await create_exercise(
                    db,
                    ExerciseCreate(
                        workout_id=workout.id,
                        catalog_entry_id=catalog_id,
                        sets=3,
                        reps=10,
                        rest_time_seconds=60,
                    ),
                )
        return plan, workout_ids

    return build_plan
