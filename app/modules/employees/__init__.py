# app/modules/employees/__init__.py
"""
Módulo Employees - Empleados de almacén

- CRUD de empleados
- Reporte de órdenes de entrada por empleado (reportInboundOrders)

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as employees_router
from .service import EmployeeService
from .repository import EmployeeRepository

__all__ = [
    "employees_router",
    "EmployeeService",
    "EmployeeRepository"
]
