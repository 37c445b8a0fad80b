# edumanage/models/attendance.py
from sqlalchemy import Column, String, Integer, Date, Text, ForeignKey
from .base import Base

# Statuses counted as attended when computing the attendance rate
ATTENDED_STATUSES = ("present", "late")

class Attendance(Base):
    __tablename__ = "attendance"

    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False)  # present, absent, late, excused
    remarks = Column(Text)
