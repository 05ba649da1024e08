from pydantic import BaseModel, ConfigDict, Field

from discography.models.mixins import MAX_INTEGER

class TrackBase(BaseModel):
    title: str = Field(min_length=1)
    track_number: int = Field(gt=0, le=MAX_INTEGER)

class TrackCreate(TrackBase):
    album_id: int

class TrackResponse(TrackBase):
    id: int
    album_id: int

    model_config = ConfigDict(from_attributes=True)


def render_track(track) -> TrackResponse:
    return TrackResponse.model_validate(track)
