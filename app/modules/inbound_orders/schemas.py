# app/modules/inbound_orders/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date

from app.core.limits import INT_MAX, NAME_MAX_LENGTH

class InboundOrderCreate(BaseModel):
    """Registrar entrada de un lote a un almacén"""
    order_date: date = Field(..., description="Fecha de la orden")
    order_number: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Número único de orden")
    employee_id: int = Field(..., gt=0, le=INT_MAX, description="Empleado que recibe")
    product_batch_id: int = Field(..., gt=0, le=INT_MAX, description="Lote recibido")
    warehouse_id: int = Field(..., gt=0, le=INT_MAX, description="Almacén destino")

class InboundOrderUpdate(BaseModel):
    order_date: Optional[date] = None
    order_number: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    employee_id: Optional[int] = Field(None, gt=0, le=INT_MAX)
    product_batch_id: Optional[int] = Field(None, gt=0, le=INT_MAX)
    warehouse_id: Optional[int] = Field(None, gt=0, le=INT_MAX)

class InboundOrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_date: date
    order_number: str
    employee_id: int
    product_batch_id: int
    warehouse_id: int
