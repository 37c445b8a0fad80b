"""Static file serving with index.html fallback for client-side routing."""
from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import FileResponse
import logging

from ..core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

def create_spa_router(static_dir: str) -> APIRouter:
    root = Path(static_dir).resolve()
    index_file = root / "index.html"
    router = APIRouter(tags=["SPA"])

    @router.get("/{full_path:path}", include_in_schema=False)
    async def serve_spa(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            raise NotFoundError()

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        if not index_file.is_file():
            logger.warning(f"SPA build missing: {index_file}")
            raise NotFoundError()
        return FileResponse(index_file)

    return router
