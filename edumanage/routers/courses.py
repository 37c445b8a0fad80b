from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import parse_id
from ..schemas.course_schemas import CourseCreate, CourseUpdate, CourseResponse
from ..services.course_service import CourseService

router = APIRouter(prefix="/api/courses", tags=["Courses"])

@router.get("", response_model=List[CourseResponse])
async def get_courses(
    program_id: Optional[str] = Query(None, alias="programId"),
    db: AsyncSession = Depends(get_db)
):
    """Get all courses, optionally for one program"""
    # A non-numeric programId is ignored rather than rejected
    try:
        program_filter = int(program_id) if program_id else None
    except ValueError:
        program_filter = None
    return await CourseService(db).get_courses(program_id=program_filter)

@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(course_id: str, db: AsyncSession = Depends(get_db)):
    return await CourseService(db).get_or_404(parse_id(course_id))

@router.post("", response_model=CourseResponse, status_code=201)
async def create_course(course_in: CourseCreate, db: AsyncSession = Depends(get_db)):
    return await CourseService(db).create(course_in.model_dump())

@router.put("/{course_id}", response_model=CourseResponse)
async def update_course(course_id: str, course_in: CourseUpdate, db: AsyncSession = Depends(get_db)):
    return await CourseService(db).update(parse_id(course_id), course_in.to_update_dict())

@router.delete("/{course_id}", status_code=204, response_class=Response)
async def delete_course(course_id: str, db: AsyncSession = Depends(get_db)):
    await CourseService(db).delete(parse_id(course_id))
    return Response(status_code=204)
