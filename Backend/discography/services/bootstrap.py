import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from discography.services.database import Base
from discography.repositories.album_repository import AlbumRepository
from discography.repositories.artist_repository import ArtistRepository
from discography.repositories.track_repository import TrackRepository
from discography.schemas.track import TrackCreate

# Import all models so SQLAlchemy knows about them and can create the tables.
from discography.models.album import Album  # noqa: F401
from discography.models.artist import Artist  # noqa: F401
from discography.models.track import Track  # noqa: F401

logger = logging.getLogger(__name__)

SEED_ALBUMS = [
    ("Blonde", 2016),
    ("Blonde on Blonde", 1966),
    ("Harvest Moon", 1992),
]

# Tracklist of the first seeded album
SEED_TRACKS = [
    "Nikes",
    "Ivy",
    "Pink + White",
    "Be Yourself",
    "Solo",
    "Skyline To",
    "Self Control",
    "Good Guy",
    "Solo (Reprise)",
]

SEED_ARTISTS = ["Frank Ocean", "Bob Dylan", "Neil Young"]


async def init_models(engine: AsyncEngine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def seed_db(db: AsyncSession) -> bool:
    """Insert the fixed demo catalogue unless an album already exists.

    Only the presence of an album is checked, so a partially seeded store is
    not repaired. Returns True when rows were inserted.
    """
    albums = AlbumRepository(db)
    if await albums.find_first() is not None:
        logger.info("Albums already present, skipping seed")
        return False

    created = [await albums.create(title, year) for title, year in SEED_ALBUMS]
    first_album = created[0]

    tracks = TrackRepository(db)
    for number, title in enumerate(SEED_TRACKS, start=1):
        await tracks.create(TrackCreate(title=title, album_id=first_album.id, track_number=number))

    artists = ArtistRepository(db)
    for name in SEED_ARTISTS:
        await artists.create(name)

    logger.info(
        f"Seeded {len(SEED_ALBUMS)} albums, {len(SEED_TRACKS)} tracks and {len(SEED_ARTISTS)} artists"
    )
    return True


async def bootstrap(engine: AsyncEngine, session_factory: async_sessionmaker[AsyncSession]) -> bool:
    """Schema first, then seed data. Safe to run on every startup."""
    await init_models(engine)
    async with session_factory() as session:
        return await seed_db(session)
