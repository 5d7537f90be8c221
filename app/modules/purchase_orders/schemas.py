# app/modules/purchase_orders/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date

from app.core.limits import INT_MAX, NAME_MAX_LENGTH

class PurchaseOrderCreate(BaseModel):
    """Crear orden de compra"""
    order_number: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Número único de orden")
    order_date: date = Field(..., description="Fecha de la orden")
    tracking_code: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Código de seguimiento")
    buyer_id: int = Field(..., gt=0, le=INT_MAX, description="Comprador")
    product_record_id: int = Field(..., gt=0, le=INT_MAX, description="Registro de precio aplicado")
    order_status_id: int = Field(..., gt=0, le=INT_MAX, description="Estado de la orden")

class PurchaseOrderUpdate(BaseModel):
    order_number: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    order_date: Optional[date] = None
    tracking_code: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    buyer_id: Optional[int] = Field(None, gt=0, le=INT_MAX)
    product_record_id: Optional[int] = Field(None, gt=0, le=INT_MAX)
    order_status_id: Optional[int] = Field(None, gt=0, le=INT_MAX)

class PurchaseOrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_number: str
    order_date: date
    tracking_code: str
    buyer_id: int
    product_record_id: int
    order_status_id: int
