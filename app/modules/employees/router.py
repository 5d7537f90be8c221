# app/modules/employees/router.py
from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional, Union

from app.config.database import get_db
from app.core.limits import INT_MAX
from app.core.responses import ApiResponse, envelope
from .service import EmployeeService
from .schemas import *

router = APIRouter()

# ==================== REPORTES ====================

@router.get(
    "/reportInboundOrders",
    response_model=ApiResponse[Union[EmployeeInboundOrdersReport, List[EmployeeInboundOrdersReport]]]
)
def report_inbound_orders(
    employee_id: Optional[int] = Query(None, alias="id", ge=0, le=INT_MAX, description="Empleado específico"),
    db: Session = Depends(get_db)
):
    """
    Órdenes de entrada registradas por empleado

    - Sin `id`: una fila por empleado, con 0 si no tiene órdenes
    - Con `id`: solo ese empleado, 404 si no existe
    """
    service = EmployeeService(db)
    return envelope(service.report_inbound_orders(employee_id))

# ==================== CRUD ====================

@router.get("/", response_model=ApiResponse[List[EmployeeResponse]])
def get_employees(db: Session = Depends(get_db)):
    service = EmployeeService(db)
    return envelope(service.get_all())

@router.get("/{employee_id}", response_model=ApiResponse[EmployeeResponse])
def get_employee(
    employee_id: int = Path(..., ge=0, le=INT_MAX, description="ID del empleado"),
    db: Session = Depends(get_db)
):
    service = EmployeeService(db)
    return envelope(service.get(employee_id))

@router.post("/", status_code=201, response_model=ApiResponse[EmployeeResponse])
def create_employee(
    employee: EmployeeCreate,
    db: Session = Depends(get_db)
):
    """
    Crear empleado

    **Validaciones:**
    - card_number_id único (409)
    - Almacén existente (404)
    """
    service = EmployeeService(db)
    return envelope(service.create(employee), 201)

@router.patch("/{employee_id}", response_model=ApiResponse[EmployeeResponse])
def update_employee(
    update_data: EmployeeUpdate,
    employee_id: int = Path(..., ge=0, le=INT_MAX, description="ID del empleado"),
    db: Session = Depends(get_db)
):
    service = EmployeeService(db)
    return envelope(service.update(employee_id, update_data))

@router.delete("/{employee_id}", status_code=204, response_class=Response)
def delete_employee(
    employee_id: int = Path(..., ge=0, le=INT_MAX, description="ID del empleado"),
    db: Session = Depends(get_db)
):
    service = EmployeeService(db)
    service.delete(employee_id)
    return Response(status_code=204)
