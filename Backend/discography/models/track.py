from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship

from discography.models.mixins import TimestampMixin
from discography.services.database import Base

class Track(TimestampMixin, Base):
    __tablename__ = "tracks"

    title = Column(String(255), nullable=False)
    # Unique per album by convention only
    track_number = Column(Integer, nullable=False)

    # Link to its parent album
    album_id = Column(Integer, ForeignKey("albums.id"), nullable=False, index=True)
    album = relationship("Album", back_populates="tracks", lazy="raise")
