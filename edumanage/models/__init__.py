# edumanage/models/__init__.py
"""Import all models here so the metadata knows every table."""
from .base import Base
from .program import Program
from .student import Student
from .course import Course
from .event import Event
from .attendance import Attendance, ATTENDED_STATUSES

__all__ = ["Base", "Program", "Student", "Course", "Event", "Attendance", "ATTENDED_STATUSES"]
