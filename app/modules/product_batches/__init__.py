# app/modules/product_batches/__init__.py
"""
Módulo Product Batches - Lotes de producto

El reporte de productos por sección se expone en el módulo sections.
"""

from .router import router as product_batches_router
from .service import ProductBatchService
from .repository import ProductBatchRepository

__all__ = [
    "product_batches_router",
    "ProductBatchService",
    "ProductBatchRepository"
]
