from typing import List
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import parse_id
from ..schemas.event_schemas import EventCreate, EventUpdate, EventResponse
from ..services.event_service import EventService, DEFAULT_UPCOMING_LIMIT

router = APIRouter(prefix="/api/events", tags=["Events"])

@router.get("", response_model=List[EventResponse])
async def get_events(db: AsyncSession = Depends(get_db)):
    return await EventService(db).get_multi()

# Declared before /{event_id} so "upcoming" is not taken for an id
@router.get("/upcoming", response_model=List[EventResponse])
async def get_upcoming_events(
    limit: int = Query(DEFAULT_UPCOMING_LIMIT, ge=1, le=50),
    db: AsyncSession = Depends(get_db)
):
    """Events from today onward for the dashboard"""
    return await EventService(db).get_upcoming(limit=limit)

@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: str, db: AsyncSession = Depends(get_db)):
    return await EventService(db).get_or_404(parse_id(event_id))

@router.post("", response_model=EventResponse, status_code=201)
async def create_event(event_in: EventCreate, db: AsyncSession = Depends(get_db)):
    return await EventService(db).create(event_in.model_dump())

@router.put("/{event_id}", response_model=EventResponse)
async def update_event(event_id: str, event_in: EventUpdate, db: AsyncSession = Depends(get_db)):
    return await EventService(db).update(parse_id(event_id), event_in.to_update_dict())

@router.delete("/{event_id}", status_code=204, response_class=Response)
async def delete_event(event_id: str, db: AsyncSession = Depends(get_db)):
    await EventService(db).delete(parse_id(event_id))
    return Response(status_code=204)
