# app/modules/employees/service.py
from typing import List, Optional, Union

from app.core.exceptions import AlreadyExistsError, NotFoundError
from app.modules.warehouses.repository import WarehouseRepository
from app.modules.warehouses.service import WarehouseNotFoundError
from app.shared.service import BaseService
from .repository import EmployeeRepository
from .schemas import EmployeeResponse, EmployeeInboundOrdersReport

class EmployeeNotFoundError(NotFoundError):
    default_message = "employee not found"

class EmployeeCardNumberAlreadyExistsError(AlreadyExistsError):
    default_message = "employee card number id already exists"

class EmployeeService(BaseService[EmployeeResponse]):
    """
    Servicio de empleados

    - card_number_id único entre empleados
    - El almacén asignado debe existir
    """

    entity_name = "employee"
    repository_class = EmployeeRepository
    response_schema = EmployeeResponse
    not_found_error = EmployeeNotFoundError
    already_exists_error = EmployeeCardNumberAlreadyExistsError
    business_key = "card_number_id"
    references = {
        "warehouse_id": (WarehouseRepository, WarehouseNotFoundError),
    }

    def report_inbound_orders(
        self, employee_id: Optional[int] = None
    ) -> Union[EmployeeInboundOrdersReport, List[EmployeeInboundOrdersReport]]:
        rows = self.repository.count_inbound_orders(employee_id)
        reports = [EmployeeInboundOrdersReport(**row._asdict()) for row in rows]
        return self._single_or_all(reports, employee_id)
