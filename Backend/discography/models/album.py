from sqlalchemy import Column, String, Integer
from sqlalchemy.orm import relationship

from discography.models.mixins import TimestampMixin
from discography.services.database import Base

class Album(TimestampMixin, Base):
    __tablename__ = "albums"

    title = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)

    # An album has many tracks. Not eager-loaded; use TrackRepository.list_for_album.
    tracks = relationship("Track", back_populates="album", lazy="raise")
