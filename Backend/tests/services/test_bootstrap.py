"""Schema creation and one-time seeding."""

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from discography.repositories.album_repository import AlbumRepository
from discography.repositories.artist_repository import ArtistRepository
from discography.repositories.track_repository import TrackRepository
from discography.services.bootstrap import bootstrap, seed_db, SEED_TRACKS


async def counts(db):
    return (
        await AlbumRepository(db).count(),
        await TrackRepository(db).count(),
        await ArtistRepository(db).count(),
    )


async def test_seed_empty_store(test_db):
    assert await seed_db(test_db) is True
    assert await counts(test_db) == (3, 9, 3)


async def test_seed_is_idempotent(test_db):
    await seed_db(test_db)
    assert await seed_db(test_db) is False
    assert await counts(test_db) == (3, 9, 3)


async def test_seed_tracks_belong_to_first_album(test_db):
    await seed_db(test_db)
    blonde = await AlbumRepository(test_db).find_first()
    assert blonde.title == "Blonde"

    tracks = await TrackRepository(test_db).list_for_album(blonde.id)
    assert [t.title for t in tracks] == SEED_TRACKS
    assert [t.track_number for t in tracks] == list(range(1, 10))


async def test_seed_skipped_when_any_album_exists(test_db):
    await AlbumRepository(test_db).create("OK Computer", 1997)
    assert await seed_db(test_db) is False
    assert await counts(test_db) == (1, 0, 0)


async def test_bootstrap_creates_schema_and_seeds():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        assert await bootstrap(engine, factory) is True
        assert await bootstrap(engine, factory) is False

        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert {"albums", "tracks", "artists"} <= set(tables)

        async with factory() as session:
            assert await counts(session) == (3, 9, 3)
    finally:
        await engine.dispose()


async def test_seeded_albums_served_by_api(client, test_session_factory):
    async with test_session_factory() as session:
        await seed_db(session)

    res = await client.get("/albums")
    assert [a["title"] for a in res.json()["albums"]] == ["Blonde", "Blonde on Blonde", "Harvest Moon"]
