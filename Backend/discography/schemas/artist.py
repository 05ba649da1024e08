from pydantic import BaseModel, ConfigDict, Field
from typing import List

class ArtistBase(BaseModel):
    name: str = Field(min_length=1)

class ArtistCreate(ArtistBase):
    pass

class ArtistResponse(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)

class ArtistEnvelope(BaseModel):
    artist: ArtistResponse

class ArtistListEnvelope(BaseModel):
    artists: List[ArtistResponse] = []


def render_artist(artist) -> ArtistResponse:
    return ArtistResponse.model_validate(artist)

def render_artists(artists) -> List[ArtistResponse]:
    return [render_artist(a) for a in artists]
