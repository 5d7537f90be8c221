# app/modules/sellers/router.py
from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import SellerService
from .schemas import *

router = APIRouter()

@router.get("/", response_model=ApiResponse[List[SellerResponse]])
def get_sellers(db: Session = Depends(get_db)):
    """Listar todos los vendedores"""
    service = SellerService(db)
    return envelope(service.get_all())

@router.get("/{seller_id}", response_model=ApiResponse[SellerResponse])
def get_seller(
    seller_id: int = Path(..., ge=0, le=INT_MAX, description="ID del vendedor"),
    db: Session = Depends(get_db)
):
    service = SellerService(db)
    return envelope(service.get(seller_id))

@router.post("/", status_code=201, response_model=ApiResponse[SellerResponse])
def create_seller(
    seller: SellerCreate,
    db: Session = Depends(get_db)
):
    """
    Crear vendedor

    **Validaciones:**
    - Todos los campos son obligatorios (422)
    - cid único en el sistema (409)
    - La localidad debe existir (404)
    """
    service = SellerService(db)
    return envelope(service.create(seller), 201)

@router.patch("/{seller_id}", response_model=ApiResponse[SellerResponse])
def update_seller(
    update_data: SellerUpdate,
    seller_id: int = Path(..., ge=0, le=INT_MAX, description="ID del vendedor"),
    db: Session = Depends(get_db)
):
    """
    Actualizar vendedor

    Solo se modifican los campos enviados; el resto conserva su valor.
    """
    service = SellerService(db)
    return envelope(service.update(seller_id, update_data))

@router.delete("/{seller_id}", status_code=204, response_class=Response)
def delete_seller(
    seller_id: int = Path(..., ge=0, le=INT_MAX, description="ID del vendedor"),
    db: Session = Depends(get_db)
):
    service = SellerService(db)
    service.delete(seller_id)
    return Response(status_code=204)
