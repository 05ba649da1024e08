import logging
from fastapi import APIRouter, Depends, status

from discography.repositories.album_repository import AlbumRepository, get_album_repository
from discography.schemas.album import (
    AlbumCreate, AlbumUpdate, AlbumEnvelope, AlbumListEnvelope, render_album, render_albums,
)


logger = logging.getLogger(__name__)


router = APIRouter()

@router.get("/albums", response_model=AlbumListEnvelope)
async def list_albums(repo: AlbumRepository = Depends(get_album_repository)) -> AlbumListEnvelope:
    """List all albums that have not been deleted"""
    albums = await repo.find_all()
    return AlbumListEnvelope(albums=render_albums(albums))

@router.post("/albums", response_model=AlbumEnvelope, status_code=status.HTTP_201_CREATED)
async def create_album(album_data: AlbumCreate, repo: AlbumRepository = Depends(get_album_repository)) -> AlbumEnvelope:
    album = await repo.create(album_data.title, album_data.year)
    logger.info(f"Created album: {album.title} (ID: {album.id})")
    return AlbumEnvelope(album=render_album(album))

@router.get("/albums/{album_id}", response_model=AlbumEnvelope)
async def read_album(album_id: int, repo: AlbumRepository = Depends(get_album_repository)) -> AlbumEnvelope:
    album = await repo.get_or_raise(album_id)
    return AlbumEnvelope(album=render_album(album))

@router.patch("/albums/{album_id}", response_model=AlbumEnvelope)
async def update_album(
    album_id: int,
    album_data: AlbumUpdate,
    repo: AlbumRepository = Depends(get_album_repository)
) -> AlbumEnvelope:
    """Apply only the fields present in the body"""
    # Rendered from the row refreshed after commit, so the response carries
    # the patched values rather than the pre-update snapshot.
    album = await repo.update(album_id, album_data.to_patch())
    return AlbumEnvelope(album=render_album(album))

@router.delete("/albums/{album_id}", response_model=AlbumEnvelope)
async def delete_album(album_id: int, repo: AlbumRepository = Depends(get_album_repository)) -> AlbumEnvelope:
    album = await repo.delete(album_id)
    logger.info(f"Soft-deleted album {album_id}")
    return AlbumEnvelope(album=render_album(album))
