# app/modules/warehouses/__init__.py
"""
Módulo Warehouses - Almacenes

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as warehouses_router
from .service import WarehouseService
from .repository import WarehouseRepository

__all__ = [
    "warehouses_router",
    "WarehouseService",
    "WarehouseRepository"
]
