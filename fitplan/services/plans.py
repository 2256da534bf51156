"""Active-plan handling on top of the plan and workout store."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.core.constants import DEFAULT_WORKOUT_TITLE, FIRST_PLAN_NAME
from fitplan.models.plan import WorkoutPlan
from fitplan.schemas.plan import WorkoutPlanCreate, WorkoutPlanRead
from fitplan.services.preferences import PreferenceStore
from fitplan.store.integrity import delete_plan
from fitplan.store.plans import create_plan, get_plan
from fitplan.store.workouts import count_workouts

logger = logging.getLogger(__name__)


async def load_or_create_active_plan(db: AsyncSession, prefs: PreferenceStore) -> WorkoutPlanRead:
    """
    Return the active plan. Falls back to the first plan when the stored id is missing or
    stale, and creates "My First Plan" (and activates it) when there are no plans at all.
    """
    active_id = prefs.get_active_plan_id()
    plan = None
    if active_id is not None:
        plan = await db.get(WorkoutPlan, active_id)
    if plan is None:
        result = await db.execute(select(WorkoutPlan).order_by(WorkoutPlan.id).limit(1))
        plan = result.scalar_one_or_none()
    if plan is None:
        created = await create_plan(db, WorkoutPlanCreate(name=FIRST_PLAN_NAME))
        prefs.set_active_plan_id(created.id)
        return created
    return WorkoutPlanRead.model_validate(plan)


async def activate_plan(db: AsyncSession, prefs: PreferenceStore, plan_id: int) -> WorkoutPlanRead:
    plan = await get_plan(db, plan_id)
    prefs.set_active_plan_id(plan.id)
    logger.info("Plan %s is now active", plan.id)
    return plan


def is_active_plan(plan: WorkoutPlanRead, prefs: PreferenceStore) -> bool:
    return prefs.get_active_plan_id() == plan.id


async def remove_plan(db: AsyncSession, prefs: PreferenceStore, plan_id: int) -> None:
    """Delete a plan (cascading) and forget it if it was the active one."""
    await delete_plan(db, plan_id)
    if prefs.get_active_plan_id() == plan_id:
        prefs.clear_active_plan_id()


async def next_workout_title(db: AsyncSession, plan_id: int) -> str:
    """Suggested title for a new workout: "Workout 1", "Workout 2", ..."""
    await get_plan(db, plan_id)
    return f"{DEFAULT_WORKOUT_TITLE} {await count_workouts(db, plan_id) + 1}"
