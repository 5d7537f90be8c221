# app/modules/products/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.core.limits import INT_MAX, NAME_MAX_LENGTH

class ProductCreate(BaseModel):
    """Crear producto"""
    product_code: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Código único del producto")
    description: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Descripción")
    width: float = Field(..., gt=0, description="Ancho")
    height: float = Field(..., gt=0, description="Alto")
    length: float = Field(..., gt=0, description="Largo")
    net_weight: float = Field(..., gt=0, description="Peso neto")
    expiration_rate: float = Field(..., ge=0, description="Tasa de vencimiento")
    recommended_freezing_temperature: float = Field(..., description="Temperatura de congelación recomendada")
    freezing_rate: float = Field(..., ge=0, description="Tasa de congelación")
    product_type_id: int = Field(..., gt=0, le=INT_MAX, description="Tipo de producto")
    seller_id: int = Field(..., gt=0, le=INT_MAX, description="Vendedor del producto")

class ProductUpdate(BaseModel):
    """Actualización parcial de producto"""
    product_code: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    width: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    length: Optional[float] = Field(None, gt=0)
    net_weight: Optional[float] = Field(None, gt=0)
    expiration_rate: Optional[float] = Field(None, ge=0)
    recommended_freezing_temperature: Optional[float] = None
    freezing_rate: Optional[float] = Field(None, ge=0)
    product_type_id: Optional[int] = Field(None, gt=0, le=INT_MAX)
    seller_id: Optional[int] = Field(None, gt=0, le=INT_MAX)

class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_code: str
    description: str
    width: float
    height: float
    length: float
    net_weight: float
    expiration_rate: float
    recommended_freezing_temperature: float
    freezing_rate: float
    product_type_id: int
    seller_id: int

# ==================== REPORTES ====================

class ProductRecordsReport(BaseModel):
    """Cantidad de registros de precio por producto"""
    product_id: int
    description: str
    records_count: int
