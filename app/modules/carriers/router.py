# app/modules/carriers/router.py
from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import CarrierService
from .schemas import *

router = APIRouter()

@router.get("/", response_model=ApiResponse[List[CarrierResponse]])
def get_carriers(db: Session = Depends(get_db)):
    service = CarrierService(db)
    return envelope(service.get_all())

@router.get("/{carrier_id}", response_model=ApiResponse[CarrierResponse])
def get_carrier(
    carrier_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = CarrierService(db)
    return envelope(service.get(carrier_id))

@router.post("/", status_code=201, response_model=ApiResponse[CarrierResponse])
def create_carrier(
    carrier: CarrierCreate,
    db: Session = Depends(get_db)
):
    """
    Registrar transportista en una localidad

    - cid único (409)
    - Localidad existente (404)
    """
    service = CarrierService(db)
    return envelope(service.create(carrier), 201)

@router.patch("/{carrier_id}", response_model=ApiResponse[CarrierResponse])
def update_carrier(
    update_data: CarrierUpdate,
    carrier_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = CarrierService(db)
    return envelope(service.update(carrier_id, update_data))

@router.delete("/{carrier_id}", status_code=204, response_class=Response)
def delete_carrier(
    carrier_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = CarrierService(db)
    service.delete(carrier_id)
    return Response(status_code=204)
