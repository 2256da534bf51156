"""Workout plan - top-level container owning workouts."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitplan.core.constants import DEFAULT_PLAN_NAME
from fitplan.db.base import Base


class WorkoutPlan(Base):
    """User-created plan. Deleting it deletes its workouts (and their exercises)."""

    __tablename__ = "workout_plans"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, default=DEFAULT_PLAN_NAME)

    workouts: Mapped[list["Workout"]] = relationship(
        "Workout", back_populates="plan", passive_deletes=True
    )
