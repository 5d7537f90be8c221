# app/modules/product_batches/router.py
from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import ProductBatchService
from .schemas import *

router = APIRouter()

@router.get("/", response_model=ApiResponse[List[ProductBatchResponse]])
def get_product_batches(db: Session = Depends(get_db)):
    service = ProductBatchService(db)
    return envelope(service.get_all())

@router.get("/{batch_id}", response_model=ApiResponse[ProductBatchResponse])
def get_product_batch(
    batch_id: int = Path(..., ge=0, le=INT_MAX, description="ID del lote"),
    db: Session = Depends(get_db)
):
    service = ProductBatchService(db)
    return envelope(service.get(batch_id))

@router.post("/", status_code=201, response_model=ApiResponse[ProductBatchResponse])
def create_product_batch(
    batch: ProductBatchCreate,
    db: Session = Depends(get_db)
):
    """
    Registrar lote de producto

    **Validaciones:**
    - Número de lote único (409)
    - Producto y sección existentes (404)
    - Fechas y cantidades consistentes (422)
    """
    service = ProductBatchService(db)
    return envelope(service.create(batch), 201)

@router.patch("/{batch_id}", response_model=ApiResponse[ProductBatchResponse])
def update_product_batch(
    update_data: ProductBatchUpdate,
    batch_id: int = Path(..., ge=0, le=INT_MAX, description="ID del lote"),
    db: Session = Depends(get_db)
):
    service = ProductBatchService(db)
    return envelope(service.update(batch_id, update_data))

@router.delete("/{batch_id}", status_code=204, response_class=Response)
def delete_product_batch(
    batch_id: int = Path(..., ge=0, le=INT_MAX, description="ID del lote"),
    db: Session = Depends(get_db)
):
    service = ProductBatchService(db)
    service.delete(batch_id)
    return Response(status_code=204)
