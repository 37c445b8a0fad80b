# edumanage/services/program_service.py
from sqlalchemy.ext.asyncio import AsyncSession
from .base_service import BaseService
from ..core.cache import DASHBOARD_STATS_KEY
from ..models.program import Program


class ProgramService(BaseService[Program]):
    not_found_message = "Programma niet gevonden"
    invalidates = (DASHBOARD_STATS_KEY,)

    def __init__(self, db: AsyncSession):
        super().__init__(Program, db)
