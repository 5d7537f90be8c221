# app/modules/localities/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.core.limits import NAME_MAX_LENGTH

class LocalityCreate(BaseModel):
    """Crear localidad"""
    locality_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Nombre de la localidad")
    province_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Provincia")
    country_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="País")

class LocalityUpdate(BaseModel):
    """Actualización parcial de localidad"""
    locality_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    province_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    country_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)

class LocalityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    locality_name: str
    province_name: str
    country_name: str

# ==================== REPORTES ====================

class LocalitySellersReport(BaseModel):
    """Cantidad de vendedores por localidad"""
    locality_id: int
    locality_name: str
    sellers_count: int

class LocalityCarriersReport(BaseModel):
    """Cantidad de transportistas por localidad"""
    locality_id: int
    locality_name: str
    carriers_count: int
