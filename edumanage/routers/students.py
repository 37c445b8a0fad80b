from typing import List
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import parse_id
from ..schemas.student_schemas import StudentCreate, StudentUpdate, StudentResponse
from ..services.student_service import StudentService

router = APIRouter(prefix="/api/students", tags=["Students"])

@router.get("", response_model=List[StudentResponse])
async def get_students(db: AsyncSession = Depends(get_db)):
    """Get all students"""
    return await StudentService(db).get_multi()

@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(student_id: str, db: AsyncSession = Depends(get_db)):
    """Get specific student"""
    return await StudentService(db).get_or_404(parse_id(student_id))

@router.post("", response_model=StudentResponse, status_code=201)
async def create_student(student_in: StudentCreate, db: AsyncSession = Depends(get_db)):
    """Create new student"""
    return await StudentService(db).create(student_in.model_dump())

@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(student_id: str, student_in: StudentUpdate, db: AsyncSession = Depends(get_db)):
    """Update student information"""
    return await StudentService(db).update(parse_id(student_id), student_in.to_update_dict())

@router.delete("/{student_id}", status_code=204, response_class=Response)
async def delete_student(student_id: str, db: AsyncSession = Depends(get_db)):
    """Delete student"""
    await StudentService(db).delete(parse_id(student_id))
    return Response(status_code=204)
