# edumanage/services/base_service.py
"""Base service with common CRUD operations."""
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy import select, func
from typing import Type, Any, Dict, Optional, List, TypeVar, Generic, Tuple

from ..core.cache import cache
from ..core.exceptions import ConflictError, DatabaseError, NotFoundError

logger = logging.getLogger(__name__)

# Define generic type
T = TypeVar('T')

# Range of the Integer primary key columns
MIN_ID = -2**31
MAX_ID = 2**31 - 1

def db_error_message(exc: SQLAlchemyError) -> str:
    """Prefer the driver's message over SQLAlchemy's wrapped text"""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)

class BaseService(Generic[T]):
    # Message used for 404s, e.g. "Student niet gevonden"
    not_found_message: str = "Niet gevonden"
    # Cache keys dropped after every successful write
    invalidates: Tuple[str, ...] = ()

    def __init__(self, model: Type[T], db: AsyncSession):
        self.model = model
        self.db = db

    async def _execute(self, stmt):
        try:
            return await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Query on {self.model.__tablename__} failed: {e}")
            raise DatabaseError(db_error_message(e))

    async def _commit(self, obj=None):
        try:
            await self.db.commit()
            if obj is not None:
                await self.db.refresh(obj)
        except IntegrityError as e:
            await self.db.rollback()
            logger.info(f"Integrity error on {self.model.__tablename__}: {e}")
            raise ConflictError(message=db_error_message(e))
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Commit on {self.model.__tablename__} failed: {e}")
            raise DatabaseError(db_error_message(e))
        for key in self.invalidates:
            await cache.delete(key)

    async def get(self, id: Any) -> Optional[T]:
        if isinstance(id, int) and not MIN_ID <= id <= MAX_ID:
            return None
        stmt = select(self.model).where(self.model.id == id)
        result = await self._execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_404(self, id: Any) -> T:
        obj = await self.get(id)
        if obj is None:
            raise NotFoundError(self.not_found_message)
        return obj

    async def get_multi(self, **filters) -> List[T]:
        stmt = select(self.model).order_by(self.model.id)

        for key, value in filters.items():
            if hasattr(self.model, key) and value is not None:
                stmt = stmt.where(getattr(self.model, key) == value)

        result = await self._execute(stmt)
        return result.scalars().all()

    async def create(self, obj_in: Dict) -> T:
        obj = self.model(**obj_in)
        self.db.add(obj)
        await self._commit(obj)
        return obj

    def check_state(self, obj: T) -> None:
        """Cross-field rules re-checked after an update is merged onto the row"""

    async def update(self, id: Any, obj_in: Dict) -> T:
        obj = await self.get_or_404(id)
        for key, value in obj_in.items():
            setattr(obj, key, value)
        self.check_state(obj)
        await self._commit(obj)
        return obj

    async def delete(self, id: Any) -> None:
        """Permanently delete record from database"""
        obj = await self.get_or_404(id)
        await self.db.delete(obj)
        await self._commit()

    async def count(self, *conditions) -> int:
        stmt = select(func.count()).select_from(self.model)
        for condition in conditions:
            stmt = stmt.where(condition)
        result = await self._execute(stmt)
        return result.scalar() or 0
