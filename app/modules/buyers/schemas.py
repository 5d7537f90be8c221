# app/modules/buyers/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.core.limits import NAME_MAX_LENGTH

class BuyerCreate(BaseModel):
    """Crear comprador"""
    card_number_id: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Número de tarjeta (único)")
    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Nombre")
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Apellido")

class BuyerUpdate(BaseModel):
    """Actualización parcial de comprador"""
    card_number_id: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    first_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)

class BuyerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    card_number_id: str
    first_name: str
    last_name: str

# ==================== REPORTES ====================

class BuyerPurchaseOrdersReport(BaseModel):
    """Comprador con la cantidad de órdenes de compra"""
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    purchase_orders_count: int
