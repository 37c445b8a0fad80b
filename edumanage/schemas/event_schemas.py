# edumanage/schemas/event_schemas.py
"""Pydantic schemas for Event entity."""
from typing import Optional
from datetime import date, time
from pydantic import Field, computed_field, field_validator, model_validator

from .base import CamelModel, reject_null

# Display color per event type; anything else uses the primary color
EVENT_TYPE_COLORS = {
    "academic": "primary",
    "social": "green",
    "meeting": "neutral",
    "exhibition": "amber",
}
DEFAULT_EVENT_COLOR = "primary"

def event_color(event_type: Optional[str]) -> str:
    return EVENT_TYPE_COLORS.get((event_type or "").lower(), DEFAULT_EVENT_COLOR)

class EventBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    start_date: date
    end_date: date
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    location: Optional[str] = Field(default=None, max_length=200)
    event_type: str = Field(..., min_length=1, max_length=30)
    program_id: Optional[int] = None
    course_id: Optional[int] = None

class EventCreate(EventBase):
    @model_validator(mode='after')
    def validate_dates(self):
        if self.end_date < self.start_date:
            raise ValueError('endDate cannot be before startDate')
        return self

class EventUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    location: Optional[str] = Field(default=None, max_length=200)
    event_type: Optional[str] = Field(default=None, min_length=1, max_length=30)
    program_id: Optional[int] = None
    course_id: Optional[int] = None

    @field_validator('title', 'start_date', 'end_date', 'event_type')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)

class EventResponse(EventBase):
    id: int

    @computed_field
    @property
    def color(self) -> str:
        return event_color(self.event_type)
