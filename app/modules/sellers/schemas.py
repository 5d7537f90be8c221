# app/modules/sellers/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.core.limits import INT_MAX, NAME_MAX_LENGTH, PHONE_MAX_LENGTH

class SellerCreate(BaseModel):
    """Crear vendedor"""
    cid: int = Field(..., gt=0, le=INT_MAX, description="Código único de la empresa")
    company_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Razón social")
    address: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Dirección")
    telephone: str = Field(..., min_length=1, max_length=PHONE_MAX_LENGTH, description="Teléfono")
    locality_id: int = Field(..., gt=0, le=INT_MAX, description="Localidad del vendedor")

class SellerUpdate(BaseModel):
    """Actualización parcial de vendedor"""
    cid: Optional[int] = Field(None, gt=0, le=INT_MAX)
    company_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    address: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    telephone: Optional[str] = Field(None, min_length=1, max_length=PHONE_MAX_LENGTH)
    locality_id: Optional[int] = Field(None, gt=0, le=INT_MAX)

class SellerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    cid: int
    company_name: str
    address: str
    telephone: str
    locality_id: int
