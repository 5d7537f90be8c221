import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import MercadoFreshError
from app.core.responses import error_response

logger = logging.getLogger(__name__)

# Identificadores de ruta o query mal formados son errores del cliente, no del body
_BAD_REQUEST_LOCATIONS = {"path", "query"}


def _format_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg', 'invalid value')}"


def setup_exception_handlers(app: FastAPI):
    """Map domain and framework errors to the response envelope"""

    @app.exception_handler(MercadoFreshError)
    async def domain_error_handler(request: Request, exc: MercadoFreshError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        status_code = 422
        if any(err.get("loc", ("",))[0] in _BAD_REQUEST_LOCATIONS for err in errors):
            status_code = 400
        message = "; ".join(_format_validation_error(err) for err in errors)
        return error_response(status_code, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Database error on {request.method} {request.url.path}")
        return error_response(500, "internal server error")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(500, "internal server error")
