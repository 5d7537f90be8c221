# app/modules/localities/__init__.py
"""
Módulo Localities - Localidades

- CRUD de localidades
- Reporte de vendedores por localidad
- Reporte de transportistas por localidad

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as localities_router, carries_router
from .service import LocalityService
from .repository import LocalityRepository

__all__ = [
    "localities_router",
    "carries_router",
    "LocalityService",
    "LocalityRepository"
]
