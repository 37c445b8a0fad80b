from .base_service import BaseService
from .student_service import StudentService
from .program_service import ProgramService
from .course_service import CourseService
from .event_service import EventService
from .dashboard_service import DashboardService

__all__ = [
    "BaseService",
    "StudentService",
    "ProgramService",
    "CourseService",
    "EventService",
    "DashboardService",
]
