# app/modules/buyers/router.py
from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional, Union

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import BuyerService
from .schemas import *

router = APIRouter()

# ==================== REPORTES ====================

@router.get(
    "/reportPurchaseOrders",
    response_model=ApiResponse[Union[BuyerPurchaseOrdersReport, List[BuyerPurchaseOrdersReport]]]
)
def report_purchase_orders(
    buyer_id: Optional[int] = Query(None, alias="id", ge=0, le=INT_MAX, description="Comprador específico"),
    db: Session = Depends(get_db)
):
    """
    Órdenes de compra por comprador
    """
    service = BuyerService(db)
    return envelope(service.report_purchase_orders(buyer_id))

# ==================== CRUD ====================

@router.get("/", response_model=ApiResponse[List[BuyerResponse]])
def get_buyers(db: Session = Depends(get_db)):
    service = BuyerService(db)
    return envelope(service.get_all())

@router.get("/{buyer_id}", response_model=ApiResponse[BuyerResponse])
def get_buyer(
    buyer_id: int = Path(..., ge=0, le=INT_MAX, description="ID del comprador"),
    db: Session = Depends(get_db)
):
    service = BuyerService(db)
    return envelope(service.get(buyer_id))

@router.post("/", status_code=201, response_model=ApiResponse[BuyerResponse])
def create_buyer(
    buyer: BuyerCreate,
    db: Session = Depends(get_db)
):
    """
    Crear comprador

    card_number_id debe ser único (409).
    """
    service = BuyerService(db)
    return envelope(service.create(buyer), 201)

@router.patch("/{buyer_id}", response_model=ApiResponse[BuyerResponse])
def update_buyer(
    update_data: BuyerUpdate,
    buyer_id: int = Path(..., ge=0, le=INT_MAX, description="ID del comprador"),
    db: Session = Depends(get_db)
):
    service = BuyerService(db)
    return envelope(service.update(buyer_id, update_data))

@router.delete("/{buyer_id}", status_code=204, response_class=Response)
def delete_buyer(
    buyer_id: int = Path(..., ge=0, le=INT_MAX, description="ID del comprador"),
    db: Session = Depends(get_db)
):
    service = BuyerService(db)
    service.delete(buyer_id)
    return Response(status_code=204)
