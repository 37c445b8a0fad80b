# edumanage/models/course.py
from sqlalchemy import Column, String, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base

class Course(Base):
    __tablename__ = "courses"

    name = Column(String(200), nullable=False)
    code = Column(String(20), nullable=False, unique=True, index=True)
    description = Column(Text)
    credits = Column(Integer, nullable=False)
    program_id = Column(Integer, ForeignKey("programs.id"), index=True)
    instructor_id = Column(Integer)
    capacity = Column(Integer, nullable=False)
    enrolled = Column(Integer, nullable=False, default=0)

    program = relationship("Program", back_populates="courses")
