# edumanage/schemas/course_schemas.py
"""Pydantic schemas for Course entity."""
from typing import Optional
from pydantic import Field, field_validator, model_validator

from .base import CamelModel, reject_null

class CourseBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    code: str = Field(..., min_length=1, max_length=20)
    description: Optional[str] = None
    credits: int = Field(..., ge=0)
    program_id: Optional[int] = None
    instructor_id: Optional[int] = None
    capacity: int = Field(..., ge=0)
    enrolled: int = Field(default=0, ge=0)

class CourseCreate(CourseBase):
    @model_validator(mode='after')
    def validate_enrolled(self):
        if self.enrolled > self.capacity:
            raise ValueError('enrolled cannot exceed capacity')
        return self

class CourseUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    description: Optional[str] = None
    credits: Optional[int] = Field(default=None, ge=0)
    program_id: Optional[int] = None
    instructor_id: Optional[int] = None
    capacity: Optional[int] = Field(default=None, ge=0)
    enrolled: Optional[int] = Field(default=None, ge=0)

    @field_validator('name', 'code', 'credits', 'capacity', 'enrolled')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)

class CourseResponse(CourseBase):
    id: int
