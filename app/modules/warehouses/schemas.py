# app/modules/warehouses/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.core.limits import INT_MAX, NAME_MAX_LENGTH, PHONE_MAX_LENGTH

class WarehouseCreate(BaseModel):
    """Crear almacén"""
    warehouse_code: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Código único del almacén")
    address: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Dirección")
    telephone: str = Field(..., min_length=1, max_length=PHONE_MAX_LENGTH, description="Teléfono")
    minimum_capacity: int = Field(..., gt=0, le=INT_MAX, description="Capacidad mínima")
    minimum_temperature: float = Field(..., description="Temperatura mínima (°C)")
    locality_id: int = Field(..., gt=0, le=INT_MAX, description="Localidad del almacén")

class WarehouseUpdate(BaseModel):
    """Actualización parcial de almacén"""
    warehouse_code: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    address: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    telephone: Optional[str] = Field(None, min_length=1, max_length=PHONE_MAX_LENGTH)
    minimum_capacity: Optional[int] = Field(None, gt=0, le=INT_MAX)
    minimum_temperature: Optional[float] = None
    locality_id: Optional[int] = Field(None, gt=0, le=INT_MAX)

class WarehouseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    warehouse_code: str
    address: str
    telephone: str
    minimum_capacity: int
    minimum_temperature: float
    locality_id: int
