from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from discography.core.config import settings  # where the database URL is resolved

engine = create_async_engine(settings.database_url, echo=settings.SQL_ECHO)
SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.
    Session is automatically closed after the request.

    Returns:
        AsyncSession: SQLAlchemy async session

    Usage:
        @router.get("/albums")
        async def list_albums(repo: AlbumRepository = Depends(get_album_repository)):
            return await repo.find_all()
    """
    async with SessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
