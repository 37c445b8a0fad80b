# edumanage/services/course_service.py
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from .base_service import BaseService
from ..core.cache import DASHBOARD_STATS_KEY
from ..core.exceptions import ValidationError
from ..models.course import Course


class CourseService(BaseService[Course]):
    not_found_message = "Cursus niet gevonden"
    invalidates = (DASHBOARD_STATS_KEY,)

    def __init__(self, db: AsyncSession):
        super().__init__(Course, db)

    def check_state(self, obj: Course) -> None:
        if obj.enrolled > obj.capacity:
            raise ValidationError("enrolled cannot exceed capacity")

    async def get_courses(self, program_id: Optional[int] = None) -> List[Course]:
        """All courses, or only those of one program"""
        return await self.get_multi(program_id=program_id)
