# app/modules/purchase_orders/__init__.py
"""
Módulo Purchase Orders - Órdenes de compra

El reporte de órdenes por comprador se expone en el módulo buyers.
"""

from .router import router as purchase_orders_router
from .service import PurchaseOrderService
from .repository import PurchaseOrderRepository

__all__ = [
    "purchase_orders_router",
    "PurchaseOrderService",
    "PurchaseOrderRepository"
]
