# app/modules/product_records/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from app.core.limits import INT_MAX

class ProductRecordCreate(BaseModel):
    """Registrar precio de un producto"""
    last_update_date: datetime = Field(..., description="Fecha de actualización del precio")
    purchase_price: float = Field(..., ge=0, description="Precio de compra")
    sale_price: float = Field(..., ge=0, description="Precio de venta")
    product_id: int = Field(..., gt=0, le=INT_MAX, description="Producto")

class ProductRecordUpdate(BaseModel):
    last_update_date: Optional[datetime] = None
    purchase_price: Optional[float] = Field(None, ge=0)
    sale_price: Optional[float] = Field(None, ge=0)
    product_id: Optional[int] = Field(None, gt=0, le=INT_MAX)

class ProductRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    last_update_date: datetime
    purchase_price: float
    sale_price: float
    product_id: int
