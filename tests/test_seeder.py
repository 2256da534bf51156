import asyncio
import base64
import io
import json

import pytest

from fitplan.core.exceptions import SeedError
from fitplan.db.session import create_engine_for, create_session_maker
from fitplan.services.seeder import CatalogSeeder, load_bundled_catalog, parse_catalog, seed_if_empty
from fitplan.store import count_catalog, list_catalog

from conftest import SAMPLE_SEED, SQUATS_IMAGE


@pytest.mark.asyncio
async def test_seed_sample_document(db):
    inserted = await seed_if_empty(db, SAMPLE_SEED)

    assert inserted == 2
    entries = {e.name: e for e in await list_catalog(db)}
    assert set(entries) == {"Push-ups", "Squats"}
    assert entries["Push-ups"].muscle_group == "Chest"
    assert entries["Push-ups"].image is None
    assert entries["Squats"].muscle_group == "Legs"
    assert entries["Squats"].image == SQUATS_IMAGE
    assert len(entries["Squats"].image) == 2


@pytest.mark.asyncio
async def test_second_seed_is_noop(db):
    assert await seed_if_empty(db, SAMPLE_SEED) == 2
    assert await seed_if_empty(db, SAMPLE_SEED) == 0
    assert await count_catalog(db) == 2


@pytest.mark.asyncio
async def test_existing_catalog_is_not_reparsed(db):
    await seed_if_empty(db, SAMPLE_SEED)
    # Would raise if parsed
    assert await seed_if_empty(db, "[{") == 0


@pytest.mark.asyncio
async def test_seed_preserves_document_order(db):
    records = [{"name": f"Exercise {i}", "muscleGroup": "Core", "image": ""} for i in range(5)]
    await seed_if_empty(db, json.dumps(records))
    assert [e.name for e in await list_catalog(db)] == [r["name"] for r in records]


@pytest.mark.asyncio
async def test_missing_image_field_means_no_image(db):
    await seed_if_empty(db, '[{"name": "Plank", "muscleGroup": "Core"}]')
    (plank,) = await list_catalog(db)
    assert plank.image is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "document",
    [
        SAMPLE_SEED[:-10],  # truncated
        "",
        '{"name": "Push-ups", "muscleGroup": "Chest"}',  # not an array
        '[{"name": "Push-ups"}]',  # missing muscleGroup
        '[{"muscleGroup": "Chest"}]',  # missing name
        '[{"name": "Push-ups", "muscleGroup": "Chest", "image": "not base64!"}]',
        '[{"name": "A", "muscleGroup": "Chest", "image": ""},'
        ' {"name": "B", "muscleGroup": "Legs", "image": "QQ"}]',  # bad padding in 2nd record
    ],
)
async def test_malformed_seed_raises_and_writes_nothing(db, document):
    with pytest.raises(SeedError):
        await seed_if_empty(db, document)
    assert await count_catalog(db) == 0
    # Store still seeds fine afterwards
    assert await seed_if_empty(db, SAMPLE_SEED) == 2


@pytest.mark.asyncio
async def test_seed_from_path_and_file_objects(db, tmp_path):
    seed_file = tmp_path / "exercises.json"
    seed_file.write_text(SAMPLE_SEED, encoding="utf-8")
    assert await seed_if_empty(db, seed_file) == 2

    assert len(parse_catalog(io.StringIO(SAMPLE_SEED))) == 2
    assert len(parse_catalog(io.BytesIO(SAMPLE_SEED.encode()))) == 2


def test_missing_seed_file_raises(tmp_path):
    with pytest.raises(SeedError):
        parse_catalog(tmp_path / "missing.json")


def test_parse_catalog_decodes_images():
    image = bytes(range(16))
    document = json.dumps(
        [{"name": "Deadlift", "muscleGroup": "Back", "image": base64.b64encode(image).decode()}]
    )
    (entry,) = parse_catalog(document)
    assert entry.name == "Deadlift"
    assert entry.muscle_group == "Back"
    assert entry.image == image


def test_parse_catalog_accepts_line_wrapped_images():
    image = bytes(range(60))
    wrapped = base64.encodebytes(image).decode()
    assert "\n" in wrapped.strip()
    document = json.dumps([{"name": "Deadlift", "muscleGroup": "Back", "image": wrapped}])

    (entry,) = parse_catalog(document)
    assert entry.image == image

    with pytest.raises(SeedError):
        parse_catalog(json.dumps([{"name": "Deadlift", "muscleGroup": "Back", "image": "ab\n$$"}]))


def test_bundled_catalog_is_valid():
    entries = parse_catalog(load_bundled_catalog())
    assert len(entries) > 0
    assert all(e.name and e.muscle_group for e in entries)
    assert "Push-ups" in {e.name for e in entries}


@pytest.mark.asyncio
async def test_concurrent_seed_runs_populate_once(session_maker, db):
    seeder = CatalogSeeder(session_maker)

    results = await asyncio.gather(seeder.run(SAMPLE_SEED), seeder.run(SAMPLE_SEED))

    assert sorted(results) == [0, 2]
    assert await count_catalog(db) == 2


@pytest.mark.asyncio
async def test_seeders_on_separate_engines_populate_once(session_maker, db, tmp_path):
    other_engine = create_engine_for(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    try:
        results = await asyncio.gather(
            CatalogSeeder(session_maker).run(SAMPLE_SEED),
            CatalogSeeder(create_session_maker(other_engine)).run(SAMPLE_SEED),
        )
    finally:
        await other_engine.dispose()

    assert sorted(results) == [0, 2]
    assert await count_catalog(db) == 2


@pytest.mark.asyncio
async def test_seeder_defaults_to_bundled_catalog(session_maker, db):
    inserted = await CatalogSeeder(session_maker).run()
    assert inserted == len(parse_catalog(load_bundled_catalog()))
    assert await count_catalog(db) == inserted
