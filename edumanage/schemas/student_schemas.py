# edumanage/schemas/student_schemas.py
"""Pydantic schemas for Student entity."""
from typing import Optional
from datetime import date
from pydantic import Field, field_validator

from .base import CamelModel, reject_null
from ..utils.date_format import to_database_format

STUDENT_STATUSES = ("active", "inactive", "graduated", "suspended", "withdrawn")

def _normalize_birth_date(value):
    if value is None or isinstance(value, date):
        return value
    normalized = to_database_format(str(value).strip())
    if normalized is None:
        raise ValueError('Date of birth must be DD/MM/YYYY or YYYY-MM-DD')
    return normalized

class StudentBase(CamelModel):
    student_id: str = Field(..., min_length=1, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)
    date_of_birth: Optional[date] = None
    gender: Optional[str] = Field(default=None, max_length=10)
    address: Optional[str] = Field(default=None, max_length=500)
    program_id: Optional[int] = None
    enrollment_year: int = Field(..., ge=1900, le=2100)
    current_year: int = Field(default=1, ge=1)
    status: str = Field(default="active")

    @field_validator('date_of_birth', mode='before')
    @classmethod
    def validate_date_of_birth(cls, v):
        return _normalize_birth_date(v)

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        if v not in STUDENT_STATUSES:
            raise ValueError(f"status must be one of: {', '.join(STUDENT_STATUSES)}")
        return v

class StudentCreate(StudentBase):
    """Schema for creating a new student"""
    pass

class StudentUpdate(CamelModel):
    """Schema for updating student - all fields optional"""
    student_id: Optional[str] = Field(default=None, min_length=1, max_length=20)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    email: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)
    date_of_birth: Optional[date] = None
    gender: Optional[str] = Field(default=None, max_length=10)
    address: Optional[str] = Field(default=None, max_length=500)
    program_id: Optional[int] = None
    enrollment_year: Optional[int] = Field(default=None, ge=1900, le=2100)
    current_year: Optional[int] = Field(default=None, ge=1)
    status: Optional[str] = None

    @field_validator('student_id', 'first_name', 'last_name', 'enrollment_year', 'current_year', 'status')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)

    @field_validator('date_of_birth', mode='before')
    @classmethod
    def validate_date_of_birth(cls, v):
        return _normalize_birth_date(v)

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        if v not in STUDENT_STATUSES:
            raise ValueError(f"status must be one of: {', '.join(STUDENT_STATUSES)}")
        return v

class StudentResponse(CamelModel):
    id: int
    student_id: str
    name: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    program_id: Optional[int] = None
    enrollment_year: int
    current_year: int
    status: str
