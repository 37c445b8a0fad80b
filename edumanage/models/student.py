# edumanage/models/student.py
from sqlalchemy import Column, String, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base

class Student(Base):
    __tablename__ = "students"

    # Basic Information
    student_id = Column(String(20), nullable=False, unique=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), index=True)
    phone = Column(String(20))
    date_of_birth = Column(Date)
    gender = Column(String(10))
    address = Column(String(500))

    # Enrollment
    program_id = Column(Integer, ForeignKey("programs.id"), index=True)
    enrollment_year = Column(Integer, nullable=False)
    current_year = Column(Integer, nullable=False, default=1)
    status = Column(String(20), default="active", nullable=False)

    program = relationship("Program", back_populates="students")

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self):
        return f"<Student {self.student_id}>"
