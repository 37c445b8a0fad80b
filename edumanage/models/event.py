# edumanage/models/event.py
from sqlalchemy import Column, String, Integer, Text, Date, Time
from .base import Base

class Event(Base):
    __tablename__ = "events"

    title = Column(String(200), nullable=False)
    description = Column(Text)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    start_time = Column(Time)
    end_time = Column(Time)
    location = Column(String(200))
    event_type = Column(String(30), nullable=False)  # academic, social, meeting, exhibition
    program_id = Column(Integer)
    course_id = Column(Integer)
