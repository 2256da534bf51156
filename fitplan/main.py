"""Application startup: storage, schema and catalog seeding."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from fitplan.core.config import Settings, get_settings
from fitplan.core.logging import setup_logging
from fitplan.db.session import (
    create_engine_from_settings,
    create_session_maker,
    init_db,
    session_scope,
)
from fitplan.services.preferences import PreferenceStore
from fitplan.services.seeder import CatalogSeeder, SeedSource

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Handles the presentation layer needs to talk to the store."""

    settings: Settings
    engine: AsyncEngine
    session_maker: async_sessionmaker[AsyncSession]
    preferences: PreferenceStore

    def session(self):
        """Transaction scope: ``async with ctx.session() as db: ...``"""
        return session_scope(self.session_maker)


async def bootstrap(
    settings: Settings | None = None,
    seed_source: SeedSource | None = None,
) -> AppContext:
    """
    Prepare the local store: create the data directory and schema, then seed the exercise
    catalog if it is empty (bundled catalog unless ``seed_source`` is given).
    Seeding finishes before the context is returned, so no other access races it.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    engine = create_engine_from_settings(settings)
    try:
        await init_db(engine)
        session_maker = create_session_maker(engine)
        inserted = await CatalogSeeder(session_maker).run(seed_source)
    except Exception:
        await engine.dispose()
        raise

    logger.info(
        "%s ready at %s (%s catalog entries seeded)",
        settings.app_name,
        settings.database_path,
        inserted,
    )
    return AppContext(
        settings=settings,
        engine=engine,
        session_maker=session_maker,
        preferences=PreferenceStore(settings.preferences_path),
    )


@asynccontextmanager
async def open_app(
    settings: Settings | None = None,
    seed_source: SeedSource | None = None,
) -> AsyncIterator[AppContext]:
    """Startup on enter; dispose the engine on exit."""
    ctx = await bootstrap(settings, seed_source)
    try:
        yield ctx
    finally:
        await ctx.engine.dispose()
