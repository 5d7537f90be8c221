# app/modules/localities/router.py
from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional, Union

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import LocalityService
from .schemas import *

router = APIRouter()

# Ruta histórica del reporte de transportistas, montada en /carries
carries_router = APIRouter()

# ==================== REPORTES ====================

@router.get(
    "/reportSellers",
    response_model=ApiResponse[Union[LocalitySellersReport, List[LocalitySellersReport]]]
)
def report_sellers(
    locality_id: Optional[int] = Query(None, alias="id", ge=0, le=INT_MAX, description="Localidad específica"),
    db: Session = Depends(get_db)
):
    """
    Cantidad de vendedores por localidad

    - Sin `id`: una fila por localidad (0 si no tiene vendedores)
    - Con `id`: solo esa localidad, 404 si no existe
    """
    service = LocalityService(db)
    return envelope(service.report_sellers(locality_id))

@router.get(
    "/reportCarriers",
    response_model=ApiResponse[Union[LocalityCarriersReport, List[LocalityCarriersReport]]]
)
def report_carriers(
    locality_id: Optional[int] = Query(None, alias="id", ge=0, le=INT_MAX, description="Localidad específica"),
    db: Session = Depends(get_db)
):
    """
    Cantidad de transportistas por localidad
    """
    service = LocalityService(db)
    return envelope(service.report_carriers(locality_id))

@carries_router.get(
    "/reportCarries",
    response_model=ApiResponse[Union[LocalityCarriersReport, List[LocalityCarriersReport]]],
    include_in_schema=False
)
def report_carries(
    locality_id: Optional[int] = Query(None, alias="id", ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = LocalityService(db)
    return envelope(service.report_carriers(locality_id))

# ==================== CRUD ====================

@router.get("/", response_model=ApiResponse[List[LocalityResponse]])
def get_localities(db: Session = Depends(get_db)):
    service = LocalityService(db)
    return envelope(service.get_all())

@router.get("/{locality_id}", response_model=ApiResponse[LocalityResponse])
def get_locality(
    locality_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = LocalityService(db)
    return envelope(service.get(locality_id))

@router.post("/", status_code=201, response_model=ApiResponse[LocalityResponse])
def create_locality(
    locality: LocalityCreate,
    db: Session = Depends(get_db)
):
    """
    Crear localidad

    **Validaciones:**
    - Nombre de localidad único (409 si ya existe)
    """
    service = LocalityService(db)
    return envelope(service.create(locality), 201)

@router.patch("/{locality_id}", response_model=ApiResponse[LocalityResponse])
def update_locality(
    update_data: LocalityUpdate,
    locality_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = LocalityService(db)
    return envelope(service.update(locality_id, update_data))

@router.delete("/{locality_id}", status_code=204, response_class=Response)
def delete_locality(
    locality_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = LocalityService(db)
    service.delete(locality_id)
    return Response(status_code=204)
