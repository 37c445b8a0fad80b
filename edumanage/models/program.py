# edumanage/models/program.py
from sqlalchemy import Column, String, Integer, Text
from sqlalchemy.orm import relationship
from .base import Base

class Program(Base):
    __tablename__ = "programs"

    name = Column(String(200), nullable=False)
    code = Column(String(20), nullable=False, unique=True, index=True)
    description = Column(Text)
    duration = Column(Integer)  # years
    department_name = Column(String(200))

    students = relationship("Student", back_populates="program", passive_deletes=True)
    courses = relationship("Course", back_populates="program", passive_deletes=True)
