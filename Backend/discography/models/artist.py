from sqlalchemy import Column, String

from discography.models.mixins import TimestampMixin
from discography.services.database import Base

class Artist(TimestampMixin, Base):
    __tablename__ = "artists"

    # No link to albums yet; the schema only records the name.
    name = Column(String(255), nullable=False)
