from . import health, students, programs, courses, events, dashboard

__all__ = [
    "health",
    "students",
    "programs",
    "courses",
    "events",
    "dashboard",
]
