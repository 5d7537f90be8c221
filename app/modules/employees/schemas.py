# app/modules/employees/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.core.limits import INT_MAX, NAME_MAX_LENGTH

class EmployeeCreate(BaseModel):
    """Crear empleado de almacén"""
    card_number_id: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Número de tarjeta (único)")
    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Nombre")
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Apellido")
    warehouse_id: int = Field(..., gt=0, le=INT_MAX, description="Almacén asignado")

class EmployeeUpdate(BaseModel):
    """Actualización parcial de empleado"""
    card_number_id: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    first_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    warehouse_id: Optional[int] = Field(None, gt=0, le=INT_MAX)

class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int

# ==================== REPORTES ====================

class EmployeeInboundOrdersReport(BaseModel):
    """Empleado con la cantidad de órdenes de entrada registradas"""
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int
    inbound_orders_count: int
