# app/modules/products/router.py
from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional, Union

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import ProductService
from .schemas import *

router = APIRouter()

# ==================== REPORTES ====================

@router.get(
    "/reportRecords",
    response_model=ApiResponse[Union[ProductRecordsReport, List[ProductRecordsReport]]]
)
@router.get(
    "/reportrecords",
    response_model=ApiResponse[Union[ProductRecordsReport, List[ProductRecordsReport]]],
    include_in_schema=False
)
def report_records(
    product_id: Optional[int] = Query(None, alias="id", ge=0, le=INT_MAX, description="Producto específico"),
    db: Session = Depends(get_db)
):
    """
    Cantidad de registros de precio por producto

    - Sin `id`: todos los productos
    - Con `id`: un solo producto, 404 si no existe
    """
    service = ProductService(db)
    return envelope(service.report_records(product_id))

# ==================== CRUD ====================

@router.get("/", response_model=ApiResponse[List[ProductResponse]])
def get_products(db: Session = Depends(get_db)):
    service = ProductService(db)
    return envelope(service.get_all())

@router.get("/{product_id}", response_model=ApiResponse[ProductResponse])
def get_product(
    product_id: int = Path(..., ge=0, le=INT_MAX, description="ID del producto"),
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    return envelope(service.get(product_id))

@router.post("/", status_code=201, response_model=ApiResponse[ProductResponse])
def create_product(
    product: ProductCreate,
    db: Session = Depends(get_db)
):
    """
    Crear producto

    **Validaciones:**
    - Código de producto único (409)
    - Vendedor existente (404)
    - Dimensiones y peso positivos (422)
    """
    service = ProductService(db)
    return envelope(service.create(product), 201)

@router.patch("/{product_id}", response_model=ApiResponse[ProductResponse])
def update_product(
    update_data: ProductUpdate,
    product_id: int = Path(..., ge=0, le=INT_MAX, description="ID del producto"),
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    return envelope(service.update(product_id, update_data))

@router.delete("/{product_id}", status_code=204, response_class=Response)
def delete_product(
    product_id: int = Path(..., ge=0, le=INT_MAX, description="ID del producto"),
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    service.delete(product_id)
    return Response(status_code=204)
