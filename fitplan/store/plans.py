"""Workout plan CRUD."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.models.plan import WorkoutPlan
from fitplan.schemas.plan import WorkoutPlanCreate, WorkoutPlanRead, WorkoutPlanUpdate
from fitplan.store.base import require_row

logger = logging.getLogger(__name__)


async def create_plan(db: AsyncSession, payload: WorkoutPlanCreate | None = None) -> WorkoutPlanRead:
    """Create a plan (default name "Workout plan")."""
    payload = payload or WorkoutPlanCreate()
    plan = WorkoutPlan(**payload.model_dump())
    db.add(plan)
    await db.flush()
    logger.info("Created plan %s (%r)", plan.id, plan.name)
    return WorkoutPlanRead.model_validate(plan)


async def get_plan(db: AsyncSession, plan_id: int) -> WorkoutPlanRead:
    return WorkoutPlanRead.model_validate(await require_row(db, WorkoutPlan, plan_id))


async def list_plans(db: AsyncSession, skip: int = 0, limit: int | None = None) -> list[WorkoutPlanRead]:
    """List plans in creation order."""
    stmt = select(WorkoutPlan).order_by(WorkoutPlan.id).offset(skip)
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await db.execute(stmt)
    return [WorkoutPlanRead.model_validate(p) for p in result.scalars().all()]


async def update_plan(db: AsyncSession, plan_id: int, payload: WorkoutPlanUpdate) -> WorkoutPlanRead:
    """Rename a plan."""
    plan = await require_row(db, WorkoutPlan, plan_id)
    for k, v in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(plan, k, v)
    await db.flush()
    return WorkoutPlanRead.model_validate(plan)
