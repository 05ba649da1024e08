from typing import List

from discography.core.exceptions import PersistenceError
from discography.models.track import Track
from discography.repositories.base import Repository
from discography.schemas.track import TrackCreate


class TrackRepository(Repository[Track]):
    model = Track
    resource_name = "track"

    async def create(self, track_create: TrackCreate) -> Track:
        try:
            return await self.add(Track(**track_create.model_dump()))
        except PersistenceError as e:
            raise PersistenceError(
                f"Could not create track with title {track_create.title}", e.operation
            ) from e

    async def list_for_album(self, album_id: int) -> List[Track]:
        """Live tracks of one album in running order."""
        result = await self.db.execute(
            self._live().where(Track.album_id == album_id).order_by(Track.track_number)
        )
        return list(result.scalars().all())
