# app/modules/buyers/__init__.py
"""
Módulo Buyers - Compradores

- CRUD de compradores
- Reporte de órdenes de compra por comprador (reportPurchaseOrders)
"""

from .router import router as buyers_router
from .service import BuyerService
from .repository import BuyerRepository

__all__ = [
    "buyers_router",
    "BuyerService",
    "BuyerRepository"
]
