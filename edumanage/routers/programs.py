from typing import List
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import parse_id
from ..schemas.program_schemas import ProgramCreate, ProgramUpdate, ProgramResponse
from ..services.program_service import ProgramService

router = APIRouter(prefix="/api/programs", tags=["Programs"])

@router.get("", response_model=List[ProgramResponse])
async def get_programs(db: AsyncSession = Depends(get_db)):
    return await ProgramService(db).get_multi()

@router.get("/{program_id}", response_model=ProgramResponse)
async def get_program(program_id: str, db: AsyncSession = Depends(get_db)):
    return await ProgramService(db).get_or_404(parse_id(program_id))

@router.post("", response_model=ProgramResponse, status_code=201)
async def create_program(program_in: ProgramCreate, db: AsyncSession = Depends(get_db)):
    return await ProgramService(db).create(program_in.model_dump())

@router.put("/{program_id}", response_model=ProgramResponse)
async def update_program(program_id: str, program_in: ProgramUpdate, db: AsyncSession = Depends(get_db)):
    return await ProgramService(db).update(parse_id(program_id), program_in.to_update_dict())

@router.delete("/{program_id}", status_code=204, response_class=Response)
async def delete_program(program_id: str, db: AsyncSession = Depends(get_db)):
    await ProgramService(db).delete(parse_id(program_id))
    return Response(status_code=204)
