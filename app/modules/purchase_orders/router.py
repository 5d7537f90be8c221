# app/modules/purchase_orders/router.py
from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import PurchaseOrderService
from .schemas import *

router = APIRouter()

@router.get("/", response_model=ApiResponse[List[PurchaseOrderResponse]])
def get_purchase_orders(db: Session = Depends(get_db)):
    service = PurchaseOrderService(db)
    return envelope(service.get_all())

@router.get("/{order_id}", response_model=ApiResponse[PurchaseOrderResponse])
def get_purchase_order(
    order_id: int = Path(..., ge=0, le=INT_MAX, description="ID de la orden"),
    db: Session = Depends(get_db)
):
    service = PurchaseOrderService(db)
    return envelope(service.get(order_id))

@router.post("/", status_code=201, response_model=ApiResponse[PurchaseOrderResponse])
def create_purchase_order(
    order: PurchaseOrderCreate,
    db: Session = Depends(get_db)
):
    """
    Crear orden de compra

    **Validaciones:**
    - Número de orden único (409)
    - Comprador y registro de precio existentes (404)
    """
    service = PurchaseOrderService(db)
    return envelope(service.create(order), 201)

@router.patch("/{order_id}", response_model=ApiResponse[PurchaseOrderResponse])
def update_purchase_order(
    update_data: PurchaseOrderUpdate,
    order_id: int = Path(..., ge=0, le=INT_MAX, description="ID de la orden"),
    db: Session = Depends(get_db)
):
    service = PurchaseOrderService(db)
    return envelope(service.update(order_id, update_data))

@router.delete("/{order_id}", status_code=204, response_class=Response)
def delete_purchase_order(
    order_id: int = Path(..., ge=0, le=INT_MAX, description="ID de la orden"),
    db: Session = Depends(get_db)
):
    service = PurchaseOrderService(db)
    service.delete(order_id)
    return Response(status_code=204)
