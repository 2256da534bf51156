"""Workout schemas."""

from pydantic import BaseModel, ConfigDict, Field

from fitplan.core.constants import DEFAULT_WORKOUT_TITLE, MAX_NAME_LENGTH
from fitplan.schemas.exercise import ExerciseDetail


class WorkoutBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(DEFAULT_WORKOUT_TITLE, min_length=1, max_length=MAX_NAME_LENGTH)


class WorkoutCreate(WorkoutBase):
    workout_plan_id: int


class WorkoutUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)


class WorkoutRead(WorkoutBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    workout_plan_id: int


class WorkoutDetail(WorkoutRead):
    """Workout with its exercises (each carrying its catalog entry)."""

    exercises: list[ExerciseDetail] = []
