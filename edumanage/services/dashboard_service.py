# edumanage/services/dashboard_service.py
"""Aggregated figures for the dashboard."""
import logging
from sqlalchemy.ext.asyncio import AsyncSession

from .base_service import BaseService
from ..core.cache import cache, DASHBOARD_STATS_KEY
from ..core.config import settings
from ..models import Attendance, Course, Program, Student, ATTENDED_STATUSES
from ..schemas.dashboard_schemas import DashboardStats

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.students = BaseService(Student, db)
        self.courses = BaseService(Course, db)
        self.programs = BaseService(Program, db)
        self.attendance = BaseService(Attendance, db)

    async def get_stats(self) -> DashboardStats:
        cached = await cache.get(DASHBOARD_STATS_KEY)
        if cached is not None:
            return DashboardStats.model_validate(cached)

        stats = await self.compute_stats()
        await cache.set(DASHBOARD_STATS_KEY, stats.model_dump(), expire=settings.dashboard_cache_ttl)
        return stats

    async def compute_stats(self) -> DashboardStats:
        total_attendance = await self.attendance.count()
        attended = 0
        if total_attendance:
            attended = await self.attendance.count(Attendance.status.in_(ATTENDED_STATUSES))

        stats = DashboardStats(
            total_students=await self.students.count(),
            active_courses=await self.courses.count(Course.enrolled > 0),
            total_programs=await self.programs.count(),
            attendance_rate=attendance_rate(attended, total_attendance),
        )
        logger.debug(f"Dashboard stats computed: {stats}")
        return stats


def attendance_rate(attended: int, total: int) -> float:
    """Percentage of attended sessions, one decimal; 0 when nothing was recorded"""
    if not total:
        return 0.0
    return round(attended * 100 / total, 1)
