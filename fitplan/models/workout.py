"""Workout and Exercise (catalog entry attached to a workout) models."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitplan.core.constants import DEFAULT_WORKOUT_TITLE
from fitplan.db.base import Base


class Workout(Base):
    """A workout inside a plan, holding exercise entries."""

    __tablename__ = "workouts"
    __table_args__ = (Index("ix_workouts_workout_plan_id", "workout_plan_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False, default=DEFAULT_WORKOUT_TITLE)
    workout_plan_id: Mapped[int] = mapped_column(
        ForeignKey("workout_plans.id", ondelete="CASCADE"), nullable=False
    )

    plan: Mapped["WorkoutPlan"] = relationship("WorkoutPlan", back_populates="workouts")
    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise", back_populates="workout", passive_deletes=True, order_by="Exercise.id"
    )


class Exercise(Base):
    """One catalog exercise in a workout, with sets/reps/rest chosen by the user."""

    __tablename__ = "exercises"
    __table_args__ = (
        Index("ix_exercises_workout_id", "workout_id"),
        Index("ix_exercises_catalog_entry_id", "catalog_entry_id"),
        CheckConstraint("sets >= 0", name="sets_non_negative"),
        CheckConstraint("reps >= 0", name="reps_non_negative"),
        CheckConstraint("rest_time_seconds >= 0", name="rest_time_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    workout_id: Mapped[int] = mapped_column(
        ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False
    )
    catalog_entry_id: Mapped[int] = mapped_column(
        ForeignKey("exercise_catalog.id", ondelete="RESTRICT"), nullable=False
    )
    sets: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reps: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rest_time_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)  # reserved, unused

    workout: Mapped["Workout"] = relationship("Workout", back_populates="exercises")
    catalog_entry: Mapped["CatalogEntry"] = relationship("CatalogEntry", back_populates="exercises")
