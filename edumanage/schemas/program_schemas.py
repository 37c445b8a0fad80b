# edumanage/schemas/program_schemas.py
"""Pydantic schemas for Program entity."""
from typing import Optional
from pydantic import Field, field_validator

from .base import CamelModel, reject_null

class ProgramBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    code: str = Field(..., min_length=1, max_length=20)
    description: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=1, le=10, description="Duration in years")
    department_name: Optional[str] = Field(default=None, max_length=200)

class ProgramCreate(ProgramBase):
    pass

class ProgramUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    description: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=1, le=10)
    department_name: Optional[str] = Field(default=None, max_length=200)

    @field_validator('name', 'code')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)

class ProgramResponse(ProgramBase):
    id: int
