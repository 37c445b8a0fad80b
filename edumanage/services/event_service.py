# edumanage/services/event_service.py
from datetime import date
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .base_service import BaseService
from ..core.exceptions import ValidationError
from ..models.event import Event

DEFAULT_UPCOMING_LIMIT = 5


class EventService(BaseService[Event]):
    not_found_message = "Evenement niet gevonden"

    def __init__(self, db: AsyncSession):
        super().__init__(Event, db)

    def check_state(self, obj: Event) -> None:
        if obj.end_date < obj.start_date:
            raise ValidationError("endDate cannot be before startDate")

    async def get_upcoming(self, limit: int = DEFAULT_UPCOMING_LIMIT, today: Optional[date] = None) -> List[Event]:
        """Events starting today or later, soonest first"""
        today = today or date.today()
        stmt = (
            select(self.model)
            .where(self.model.start_date >= today)
            .order_by(
                self.model.start_date.asc(),
                self.model.start_time.asc().nulls_last(),
                self.model.id.asc(),
            )
            .limit(limit)
        )
        result = await self._execute(stmt)
        return result.scalars().all()
