# app/modules/warehouses/router.py
from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import WarehouseService
from .schemas import *

router = APIRouter()

@router.get("/", response_model=ApiResponse[List[WarehouseResponse]])
def get_warehouses(db: Session = Depends(get_db)):
    """Listar almacenes"""
    service = WarehouseService(db)
    return envelope(service.get_all())

@router.get("/{warehouse_id}", response_model=ApiResponse[WarehouseResponse])
def get_warehouse(
    warehouse_id: int = Path(..., ge=0, le=INT_MAX, description="ID del almacén"),
    db: Session = Depends(get_db)
):
    service = WarehouseService(db)
    return envelope(service.get(warehouse_id))

@router.post("/", status_code=201, response_model=ApiResponse[WarehouseResponse])
def create_warehouse(
    warehouse: WarehouseCreate,
    db: Session = Depends(get_db)
):
    """
    Crear almacén

    **Validaciones:**
    - Código de almacén único (409)
    - Localidad existente (404)
    """
    service = WarehouseService(db)
    return envelope(service.create(warehouse), 201)

@router.patch("/{warehouse_id}", response_model=ApiResponse[WarehouseResponse])
def update_warehouse(
    update_data: WarehouseUpdate,
    warehouse_id: int = Path(..., ge=0, le=INT_MAX, description="ID del almacén"),
    db: Session = Depends(get_db)
):
    service = WarehouseService(db)
    return envelope(service.update(warehouse_id, update_data))

@router.delete("/{warehouse_id}", status_code=204, response_class=Response)
def delete_warehouse(
    warehouse_id: int = Path(..., ge=0, le=INT_MAX, description="ID del almacén"),
    db: Session = Depends(get_db)
):
    service = WarehouseService(db)
    service.delete(warehouse_id)
    return Response(status_code=204)
