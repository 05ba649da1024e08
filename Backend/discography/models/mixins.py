import datetime
from sqlalchemy import Integer, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

# Largest value an INTEGER column holds on Postgres (int32). SQLite allows more,
# but ids and years are kept inside the narrower range on both backends.
MAX_INTEGER = 2**31 - 1


class TimestampMixin:
    """Surrogate id plus created/updated/deleted timestamps shared by every table.

    A row with deleted_at set is soft-deleted: it stays in the table but every
    read path filters it out.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True, autoincrement=True)

    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    deleted_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), index=True)
