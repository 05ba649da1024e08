import datetime
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from discography.core.exceptions import NotFoundError, PersistenceError
from discography.models.mixins import MAX_INTEGER

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """find/create/update/delete for one model class over an AsyncSession.

    Every read excludes soft-deleted rows (deleted_at IS NOT NULL).
    """

    model: Type[ModelT]
    resource_name: str

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    def _live(self):
        return select(self.model).where(self.model.deleted_at.is_(None))

    async def find_all(self) -> List[ModelT]:
        """All live rows, oldest id first."""
        result = await self.db.execute(self._live().order_by(self.model.id))
        return list(result.scalars().all())

    async def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """The live row with this id, or None."""
        if not 0 < entity_id <= MAX_INTEGER:
            return None
        result = await self.db.execute(self._live().where(self.model.id == entity_id))
        return result.scalar_one_or_none()

    async def find_first(self) -> Optional[ModelT]:
        result = await self.db.execute(self._live().order_by(self.model.id).limit(1))
        return result.scalars().first()

    async def count(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(self.model).where(self.model.deleted_at.is_(None))
        )
        return result.scalar_one()

    async def get_or_raise(self, entity_id: int) -> ModelT:
        entity = await self.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.resource_name, entity_id)
        return entity

    async def add(self, entity: ModelT) -> ModelT:
        """Insert a new row and return it with its assigned id."""
        self.db.add(entity)
        await self._commit("create")
        await self.db.refresh(entity)
        return entity

    async def update(self, entity_id: int, patch: dict[str, Any]) -> ModelT:
        """Apply only the keys present in patch. Raises NotFoundError for a missing id."""
        entity = await self.get_or_raise(entity_id)
        for field, value in patch.items():
            setattr(entity, field, value)
        await self._commit("update")
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> ModelT:
        """Soft-delete the row and return it as it was last stored."""
        entity = await self.get_or_raise(entity_id)
        entity.deleted_at = datetime.datetime.now(datetime.timezone.utc)
        await self._commit("delete")
        await self.db.refresh(entity)
        return entity

    async def _commit(self, operation: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"DB integrity error on {self.resource_name} {operation}: {e}")
            raise PersistenceError("Integrity constraint violated", operation) from e
        except OperationalError as e:
            await self.db.rollback()
            logger.error(f"DB operational error on {self.resource_name} {operation}: {e}")
            raise PersistenceError("Connection or operational error", operation) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"SQLAlchemy error on {self.resource_name} {operation}: {e}")
            raise PersistenceError("Database operation failed", operation) from e
