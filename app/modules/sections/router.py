# app/modules/sections/router.py
from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional, Union

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import SectionService
from .schemas import *

router = APIRouter()

# ==================== REPORTES ====================

@router.get(
    "/reportProducts",
    response_model=ApiResponse[Union[SectionProductsReport, List[SectionProductsReport]]]
)
def report_products(
    section_id: Optional[int] = Query(None, alias="id", ge=0, le=INT_MAX, description="Sección específica"),
    db: Session = Depends(get_db)
):
    """
    Cantidad de productos almacenados por sección

    **Cálculo:** suma de `current_quantity` de los lotes de cada sección.
    Las secciones sin lotes se reportan con 0.
    """
    service = SectionService(db)
    return envelope(service.report_products(section_id))

# ==================== CRUD ====================

@router.get("/", response_model=ApiResponse[List[SectionResponse]])
def get_sections(db: Session = Depends(get_db)):
    service = SectionService(db)
    return envelope(service.get_all())

@router.get("/{section_id}", response_model=ApiResponse[SectionResponse])
def get_section(
    section_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = SectionService(db)
    return envelope(service.get(section_id))

@router.post("/", status_code=201, response_model=ApiResponse[SectionResponse])
def create_section(
    section: SectionCreate,
    db: Session = Depends(get_db)
):
    """
    Crear sección

    **Validaciones:**
    - Número de sección único (409)
    - Almacén existente (404)
    - Capacidades consistentes (422)
    """
    service = SectionService(db)
    return envelope(service.create(section), 201)

@router.patch("/{section_id}", response_model=ApiResponse[SectionResponse])
def update_section(
    update_data: SectionUpdate,
    section_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = SectionService(db)
    return envelope(service.update(section_id, update_data))

@router.delete("/{section_id}", status_code=204, response_class=Response)
def delete_section(
    section_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = SectionService(db)
    service.delete(section_id)
    return Response(status_code=204)
