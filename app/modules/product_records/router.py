# app/modules/product_records/router.py
from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import ProductRecordService
from .schemas import *

router = APIRouter()

@router.get("/", response_model=ApiResponse[List[ProductRecordResponse]])
def get_product_records(db: Session = Depends(get_db)):
    service = ProductRecordService(db)
    return envelope(service.get_all())

@router.get("/{record_id}", response_model=ApiResponse[ProductRecordResponse])
def get_product_record(
    record_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = ProductRecordService(db)
    return envelope(service.get(record_id))

@router.post("/", status_code=201, response_model=ApiResponse[ProductRecordResponse])
def create_product_record(
    record: ProductRecordCreate,
    db: Session = Depends(get_db)
):
    """
    Registrar precios de compra/venta de un producto

    El producto debe existir (404).
    """
    service = ProductRecordService(db)
    return envelope(service.create(record), 201)

@router.patch("/{record_id}", response_model=ApiResponse[ProductRecordResponse])
def update_product_record(
    update_data: ProductRecordUpdate,
    record_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = ProductRecordService(db)
    return envelope(service.update(record_id, update_data))

@router.delete("/{record_id}", status_code=204, response_class=Response)
def delete_product_record(
    record_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = ProductRecordService(db)
    service.delete(record_id)
    return Response(status_code=204)
