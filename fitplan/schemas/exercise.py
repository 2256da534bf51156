"""Exercise (workout entry) schemas."""

from pydantic import BaseModel, ConfigDict, Field

from fitplan.core.constants import DEFAULT_REPS, DEFAULT_REST_TIME_SECONDS, DEFAULT_SETS
from fitplan.schemas.catalog import CatalogEntryRead


class ExerciseBase(BaseModel):
    workout_id: int
    catalog_entry_id: int
    sets: int = Field(DEFAULT_SETS, ge=0)
    reps: int = Field(DEFAULT_REPS, ge=0)
    rest_time_seconds: int = Field(DEFAULT_REST_TIME_SECONDS, ge=0)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: int


class ExerciseDetail(ExerciseRead):
    """Exercise with the catalog definition needed to render it."""

    catalog_entry: CatalogEntryRead
