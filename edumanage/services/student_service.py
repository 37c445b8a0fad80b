# edumanage/services/student_service.py
from sqlalchemy.ext.asyncio import AsyncSession
from .base_service import BaseService
from ..core.cache import DASHBOARD_STATS_KEY
from ..models.student import Student


class StudentService(BaseService[Student]):
    not_found_message = "Student niet gevonden"
    invalidates = (DASHBOARD_STATS_KEY,)

    def __init__(self, db: AsyncSession):
        super().__init__(Student, db)
