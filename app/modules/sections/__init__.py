# app/modules/sections/__init__.py
"""
Módulo Sections - Secciones de almacén

- CRUD de secciones
- Reporte de productos por sección (reportProducts)
"""

from .router import router as sections_router
from .service import SectionService
from .repository import SectionRepository

__all__ = [
    "sections_router",
    "SectionService",
    "SectionRepository"
]
