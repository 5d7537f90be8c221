# app/modules/inbound_orders/router.py
from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import InboundOrderService
from .schemas import *

router = APIRouter()

@router.get("/", response_model=ApiResponse[List[InboundOrderResponse]])
def get_inbound_orders(db: Session = Depends(get_db)):
    service = InboundOrderService(db)
    return envelope(service.get_all())

@router.get("/{order_id}", response_model=ApiResponse[InboundOrderResponse])
def get_inbound_order(
    order_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = InboundOrderService(db)
    return envelope(service.get(order_id))

@router.post("/", status_code=201, response_model=ApiResponse[InboundOrderResponse])
def create_inbound_order(
    order: InboundOrderCreate,
    db: Session = Depends(get_db)
):
    """
    Registrar orden de entrada

    **Validaciones:**
    - Número de orden único (409)
    - Empleado, lote y almacén existentes (404)
    """
    service = InboundOrderService(db)
    return envelope(service.create(order), 201)

@router.patch("/{order_id}", response_model=ApiResponse[InboundOrderResponse])
def update_inbound_order(
    update_data: InboundOrderUpdate,
    order_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = InboundOrderService(db)
    return envelope(service.update(order_id, update_data))

@router.delete("/{order_id}", status_code=204, response_class=Response)
def delete_inbound_order(
    order_id: int = Path(..., ge=0, le=INT_MAX),
    db: Session = Depends(get_db)
):
    service = InboundOrderService(db)
    service.delete(order_id)
    return Response(status_code=204)
