from fastapi import FastAPI, Request, Response
from contextlib import asynccontextmanager
import logging
import time

from .core.config import settings
from .core.database import close_db_connections, init_models
from .core.cache import cache
from .core.error_handlers import register_exception_handlers, server_error_response
from .core.logging import setup_logging
from .routers import health, students, programs, courses, events, dashboard
from .routers.spa import create_spa_router

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, PATCH",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting EduManage API")

    if settings.create_tables:
        await init_models()

    await cache.connect()
    if cache.enabled:
        logger.info("Cache initialized")

    yield

    logger.info("Shutting down EduManage API")
    await cache.disconnect()
    await close_db_connections()
    logger.info("Shutdown complete")

def create_app(production: bool = None) -> FastAPI:
    setup_logging()
    if production is None:
        production = settings.is_production

    app = FastAPI(
        title="EduManage API",
        description="School administration: students, programs, courses and events",
        version=settings.app_version,
        lifespan=lifespan
    )

    # Registered first so it runs innermost: times the request and turns
    # anything no exception handler claimed into a 500 JSON body
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = server_error_response(request, exc)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")
        return response

    # Outermost: CORS headers on every response, preflight answered directly
    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(students.router)
    app.include_router(programs.router)
    app.include_router(courses.router)
    app.include_router(events.router)
    app.include_router(dashboard.router)

    # Must stay last: it matches every path
    if production:
        app.include_router(create_spa_router(settings.static_dir))

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("edumanage.main:app", host="0.0.0.0", port=8000, reload=not settings.is_production)
