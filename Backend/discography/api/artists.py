import logging
from fastapi import APIRouter, Depends, status

from discography.repositories.artist_repository import ArtistRepository, get_artist_repository
from discography.schemas.artist import (
    ArtistCreate, ArtistEnvelope, ArtistListEnvelope, render_artist, render_artists,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Artists can be listed, created and fetched. There is no update or delete route.

@router.get("/artists", response_model=ArtistListEnvelope)
async def list_artists(repo: ArtistRepository = Depends(get_artist_repository)):
    artists = await repo.find_all()
    return ArtistListEnvelope(artists=render_artists(artists))

@router.post("/artists", response_model=ArtistEnvelope, status_code=status.HTTP_201_CREATED)
async def create_artist(artist_data: ArtistCreate, repo: ArtistRepository = Depends(get_artist_repository)):
    artist = await repo.create(artist_data.name)
    logger.info(f"Created artist: {artist.name} (ID: {artist.id})")
    return ArtistEnvelope(artist=render_artist(artist))

@router.get("/artists/{artist_id}", response_model=ArtistEnvelope)
async def read_artist(artist_id: int, repo: ArtistRepository = Depends(get_artist_repository)):
    artist = await repo.get_or_raise(artist_id)
    return ArtistEnvelope(artist=render_artist(artist))
