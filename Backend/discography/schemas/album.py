from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from discography.models.mixins import MAX_INTEGER

class AlbumBase(BaseModel):
    title: str = Field(min_length=1)
    year: int = Field(gt=0, le=MAX_INTEGER)

class AlbumCreate(AlbumBase):
    pass

class AlbumUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    year: Optional[int] = Field(default=None, gt=0, le=MAX_INTEGER)

    def to_patch(self) -> dict:
        """Only the fields the client actually sent. An explicit null counts as omitted."""
        return self.model_dump(exclude_unset=True, exclude_none=True)

class AlbumResponse(BaseModel):
    id: int
    title: str
    year: int

    model_config = ConfigDict(from_attributes=True)

class AlbumEnvelope(BaseModel):
    album: AlbumResponse

class AlbumListEnvelope(BaseModel):
    albums: List[AlbumResponse] = []


def render_album(album) -> AlbumResponse:
    return AlbumResponse.model_validate(album)

def render_albums(albums) -> List[AlbumResponse]:
    return [render_album(a) for a in albums]
