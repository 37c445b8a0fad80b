# edumanage/schemas/dashboard_schemas.py
from .base import CamelModel

class DashboardStats(CamelModel):
    total_students: int = 0
    active_courses: int = 0
    total_programs: int = 0
    attendance_rate: float = 0.0
