"""
One-time catalog seeding from the bundled ``exercises.json``.

The document is a JSON array of ``{"name", "muscleGroup", "image"}`` objects, ``image``
being base64 (empty or missing for no image). Seeding happens only while the catalog is
empty, and the whole document is inserted in one flush: a bad record aborts everything.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from importlib.resources import files
from pathlib import Path
from typing import IO, Union

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fitplan.core.exceptions import SeedError
from fitplan.db.session import begin_immediate, session_scope
from fitplan.models.catalog import CatalogEntry
from fitplan.schemas.catalog import CatalogSeedRecord
from fitplan.store.catalog import count_catalog

logger = logging.getLogger(__name__)

SeedSource = Union[str, bytes, Path, IO[str], IO[bytes]]

_records_adapter = TypeAdapter(list[CatalogSeedRecord])


def load_bundled_catalog() -> bytes:
    """Raw bytes of the exercise catalog shipped with the package."""
    return (files("fitplan") / "data" / "exercises.json").read_bytes()


def _read_source(source: SeedSource) -> str | bytes:
    if isinstance(source, Path):
        try:
            return source.read_bytes()
        except OSError as e:
            raise SeedError(f"Cannot read seed file {source}: {e}") from e
    if isinstance(source, (str, bytes)):
        return source
    return source.read()


def parse_catalog(source: SeedSource) -> list[CatalogEntry]:
    """Parse and decode the seed document into unsaved CatalogEntry rows."""
    raw = _read_source(source)
    try:
        records = _records_adapter.validate_json(raw)
    except ValidationError as e:
        raise SeedError(f"Malformed catalog seed: {e.error_count()} error(s): {e}") from e

    entries = []
    for i, record in enumerate(records):
        image = None
        if record.image:
            try:
                # MIME-style seeds wrap the payload across lines
                image = base64.b64decode("".join(record.image.split()), validate=True)
            except (binascii.Error, ValueError) as e:
                raise SeedError(f"Record {i} ({record.name!r}): invalid base64 image: {e}") from e
        entries.append(
            CatalogEntry(name=record.name, muscle_group=record.muscle_group, image=image)
        )
    return entries


async def seed_if_empty(db: AsyncSession, source: SeedSource) -> int:
    """
    Insert the catalog from ``source`` unless it already has entries.
    Returns the number of entries inserted (0 when skipped).
    Raises SeedError on malformed input; nothing is added to the session in that case.
    """
    existing = await count_catalog(db)
    if existing:
        logger.info("Catalog has %s entries, skipping seeding", existing)
        return 0

    entries = parse_catalog(source)
    if not entries:
        logger.warning("Catalog seed is empty, nothing to insert")
        return 0

    db.add_all(entries)
    await db.flush()
    logger.info("Seeded %s catalog entries", len(entries))
    return len(entries)


class CatalogSeeder:
    """
    Runs seed_if_empty in its own write transaction, one pass at a time.
    The write lock is taken before the emptiness check, so seeders on other
    engines or processes sharing the file wait instead of inserting twice.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker
        self._lock = asyncio.Lock()

    async def run(self, source: SeedSource | None = None) -> int:
        if source is None:
            source = load_bundled_catalog()
        async with self._lock:
            async with session_scope(self._session_maker) as db:
                await begin_immediate(db)
                return await seed_if_empty(db, source)
