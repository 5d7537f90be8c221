# app/modules/inbound_orders/__init__.py
"""
Módulo Inbound Orders - Órdenes de entrada a almacén
"""

from .router import router as inbound_orders_router
from .service import InboundOrderService
from .repository import InboundOrderRepository

__all__ = [
    "inbound_orders_router",
    "InboundOrderService",
    "InboundOrderRepository"
]
