# app/modules/sellers/__init__.py
"""
Módulo Sellers - Vendedores

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as sellers_router
from .service import SellerService
from .repository import SellerRepository

__all__ = [
    "sellers_router",
    "SellerService",
    "SellerRepository"
]
