# app/modules/sections/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.core.limits import INT_MAX

class SectionCreate(BaseModel):
    """Crear sección dentro de un almacén"""
    section_number: int = Field(..., gt=0, le=INT_MAX, description="Número único de sección")
    current_temperature: float = Field(..., description="Temperatura actual (°C)")
    minimum_temperature: float = Field(..., description="Temperatura mínima (°C)")
    current_capacity: int = Field(..., ge=0, le=INT_MAX, description="Capacidad ocupada")
    minimum_capacity: int = Field(..., ge=0, le=INT_MAX, description="Capacidad mínima")
    maximum_capacity: int = Field(..., gt=0, le=INT_MAX, description="Capacidad máxima")
    warehouse_id: int = Field(..., gt=0, le=INT_MAX, description="Almacén de la sección")
    product_type_id: int = Field(..., gt=0, le=INT_MAX, description="Tipo de producto almacenado")

class SectionUpdate(BaseModel):
    """Actualización parcial de sección"""
    section_number: Optional[int] = Field(None, gt=0, le=INT_MAX)
    current_temperature: Optional[float] = None
    minimum_temperature: Optional[float] = None
    current_capacity: Optional[int] = Field(None, ge=0, le=INT_MAX)
    minimum_capacity: Optional[int] = Field(None, ge=0, le=INT_MAX)
    maximum_capacity: Optional[int] = Field(None, gt=0, le=INT_MAX)
    warehouse_id: Optional[int] = Field(None, gt=0, le=INT_MAX)
    product_type_id: Optional[int] = Field(None, gt=0, le=INT_MAX)

class SectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    section_number: int
    current_temperature: float
    minimum_temperature: float
    current_capacity: int
    minimum_capacity: int
    maximum_capacity: int
    warehouse_id: int
    product_type_id: int

# ==================== REPORTES ====================

class SectionProductsReport(BaseModel):
    """Unidades de producto en lotes por sección"""
    section_id: int
    section_number: int
    products_count: int
