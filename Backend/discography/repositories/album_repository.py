from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from discography.models.album import Album
from discography.repositories.base import Repository
from discography.services.database import get_db


class AlbumRepository(Repository[Album]):
    model = Album
    resource_name = "album"

    async def create(self, title: str, year: int) -> Album:
        """Create a new album record."""
        return await self.add(Album(title=title, year=year))


async def get_album_repository(db: AsyncSession = Depends(get_db)) -> AlbumRepository:
    return AlbumRepository(db)
