from typing import Any, Generic, Optional, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope común a todas las respuestas de la API"""
    status: int
    data: Optional[DataT] = None
    error: str = ""


def envelope(data: Any = None, status_code: int = 200) -> dict:
    """Envolver un resultado exitoso"""
    return {"status": status_code, "data": data, "error": ""}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Respuesta de error con el mismo envelope"""
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "data": None, "error": message}
    )
