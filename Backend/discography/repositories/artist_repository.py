from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from discography.models.artist import Artist
from discography.repositories.base import Repository
from discography.services.database import get_db


class ArtistRepository(Repository[Artist]):
    model = Artist
    resource_name = "artist"

    async def create(self, name: str) -> Artist:
        """Create a new artist record."""
        return await self.add(Artist(name=name))


async def get_artist_repository(db: AsyncSession = Depends(get_db)) -> ArtistRepository:
    return ArtistRepository(db)
