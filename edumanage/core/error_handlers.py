from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from .exceptions import EduManageException, ValidationError

logger = logging.getLogger(__name__)

async def edumanage_exception_handler(request: Request, exc: EduManageException):
    """Handle application exceptions"""
    if exc.status_code >= 500:
        logger.error(f"{exc.error}: {exc.message} - Path: {request.url.path}")
    else:
        logger.info(f"{exc.error} ({exc.status_code}) - Path: {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures as 400s"""
    errors = jsonable_encoder(exc.errors())
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in errors
    )
    error = ValidationError(message, errors=errors)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Keep framework errors (unknown route, bad method) in the same body shape"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )

def server_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort response for anything no handler claimed"""
    logger.exception(f"Unexpected error: {exc} - Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Server Error", "message": str(exc) or "Er is een onverwachte fout opgetreden"}
    )

def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(EduManageException, edumanage_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
