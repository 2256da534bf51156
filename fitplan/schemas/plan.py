"""Workout plan schemas."""

from pydantic import BaseModel, ConfigDict, Field

from fitplan.core.constants import DEFAULT_PLAN_NAME, MAX_NAME_LENGTH


class WorkoutPlanBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(DEFAULT_PLAN_NAME, min_length=1, max_length=MAX_NAME_LENGTH)


class WorkoutPlanCreate(WorkoutPlanBase):
    pass


class WorkoutPlanUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)


class WorkoutPlanRead(WorkoutPlanBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
