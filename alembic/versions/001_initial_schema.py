"""Initial schema: workout_plans, workouts, exercise_catalog, exercises.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "workout_plans",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_plans")),
    )

    op.create_table(
        "exercise_catalog",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("muscle_group", sa.String(length=100), nullable=False),
        sa.Column("image", sa.LargeBinary(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_exercise_catalog")),
    )
    op.create_index(op.f("ix_exercise_catalog_name"), "exercise_catalog", ["name"], unique=False)
    op.create_index(
        op.f("ix_exercise_catalog_muscle_group"), "exercise_catalog", ["muscle_group"], unique=False
    )

    op.create_table(
        "workouts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("workout_plan_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["workout_plan_id"],
            ["workout_plans.id"],
            name=op.f("fk_workouts_workout_plan_id_workout_plans"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workouts")),
    )
    op.create_index("ix_workouts_workout_plan_id", "workouts", ["workout_plan_id"], unique=False)

    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("workout_id", sa.Integer(), nullable=False),
        sa.Column("catalog_entry_id", sa.Integer(), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("rest_time_seconds", sa.Integer(), nullable=False),
        sa.Column("image", sa.LargeBinary(), nullable=True),
        sa.CheckConstraint("sets >= 0", name=op.f("ck_exercises_sets_non_negative")),
        sa.CheckConstraint("reps >= 0", name=op.f("ck_exercises_reps_non_negative")),
        sa.CheckConstraint(
            "rest_time_seconds >= 0", name=op.f("ck_exercises_rest_time_non_negative")
        ),
        sa.ForeignKeyConstraint(
            ["catalog_entry_id"],
            ["exercise_catalog.id"],
            name=op.f("fk_exercises_catalog_entry_id_exercise_catalog"),
            ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["workout_id"],
            ["workouts.id"],
            name=op.f("fk_exercises_workout_id_workouts"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_exercises")),
    )
    op.create_index("ix_exercises_workout_id", "exercises", ["workout_id"], unique=False)
    op.create_index("ix_exercises_catalog_entry_id", "exercises", ["catalog_entry_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_exercises_catalog_entry_id", table_name="exercises")
    op.drop_index("ix_exercises_workout_id", table_name="exercises")
    op.drop_table("exercises")
    op.drop_index("ix_workouts_workout_plan_id", table_name="workouts")
    op.drop_table("workouts")
    op.drop_index(op.f("ix_exercise_catalog_muscle_group"), table_name="exercise_catalog")
    op.drop_index(op.f("ix_exercise_catalog_name"), table_name="exercise_catalog")
    op.drop_table("exercise_catalog")
    op.drop_table("workout_plans")
