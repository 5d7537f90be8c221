# app/modules/product_batches/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date

from app.core.limits import INT_MAX

class ProductBatchCreate(BaseModel):
    """Registrar lote de producto en una sección"""
    batch_number: int = Field(..., gt=0, le=INT_MAX, description="Número único de lote")
    current_quantity: int = Field(..., ge=0, le=INT_MAX, description="Cantidad actual")
    current_temperature: float = Field(..., description="Temperatura actual (°C)")
    due_date: date = Field(..., description="Fecha de vencimiento")
    initial_quantity: int = Field(..., gt=0, le=INT_MAX, description="Cantidad inicial")
    manufacturing_date: date = Field(..., description="Fecha de fabricación")
    manufacturing_hour: int = Field(..., ge=0, le=23, description="Hora de fabricación")
    minimum_temperature: float = Field(..., description="Temperatura mínima (°C)")
    product_id: int = Field(..., gt=0, le=INT_MAX, description="Producto del lote")
    section_id: int = Field(..., gt=0, le=INT_MAX, description="Sección donde se almacena")

class ProductBatchUpdate(BaseModel):
    batch_number: Optional[int] = Field(None, gt=0, le=INT_MAX)
    current_quantity: Optional[int] = Field(None, ge=0, le=INT_MAX)
    current_temperature: Optional[float] = None
    due_date: Optional[date] = None
    initial_quantity: Optional[int] = Field(None, gt=0, le=INT_MAX)
    manufacturing_date: Optional[date] = None
    manufacturing_hour: Optional[int] = Field(None, ge=0, le=23)
    minimum_temperature: Optional[float] = None
    product_id: Optional[int] = Field(None, gt=0, le=INT_MAX)
    section_id: Optional[int] = Field(None, gt=0, le=INT_MAX)

class ProductBatchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    batch_number: int
    current_quantity: int
    current_temperature: float
    due_date: date
    initial_quantity: int
    manufacturing_date: date
    manufacturing_hour: int
    minimum_temperature: float
    product_id: int
    section_id: int
