# app/modules/product_records/__init__.py
"""
Módulo Product Records - Registros de precio de productos
"""

from .router import router as product_records_router
from .service import ProductRecordService
from .repository import ProductRecordRepository

__all__ = [
    "product_records_router",
    "ProductRecordService",
    "ProductRecordRepository"
]
