# app/modules/carriers/__init__.py
"""
Módulo Carriers - Transportistas

El reporte de transportistas por localidad vive en el módulo localities.
"""

from .router import router as carriers_router
from .service import CarrierService
from .repository import CarrierRepository

__all__ = [
    "carriers_router",
    "CarrierService",
    "CarrierRepository"
]
