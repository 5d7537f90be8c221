# app/modules/inbound_orders/service.py
from app.core.exceptions import AlreadyExistsError, NotFoundError
from app.modules.employees.repository import EmployeeRepository
from app.modules.employees.service import EmployeeNotFoundError
from app.modules.product_batches.repository import ProductBatchRepository
from app.modules.product_batches.service import ProductBatchNotFoundError
from app.modules.warehouses.repository import WarehouseRepository
from app.modules.warehouses.service import WarehouseNotFoundError
from app.shared.service import BaseService
from .repository import InboundOrderRepository
from .schemas import InboundOrderResponse

class InboundOrderNotFoundError(NotFoundError):
    default_message = "inbound order not found"

class InboundOrderNumberAlreadyExistsError(AlreadyExistsError):
    default_message = "inbound order number already exists"

class InboundOrderService(BaseService[InboundOrderResponse]):
    """
    Servicio de órdenes de entrada

    Empleado, lote y almacén deben existir; order_number es único.
    """

    entity_name = "inbound order"
    repository_class = InboundOrderRepository
    response_schema = InboundOrderResponse
    not_found_error = InboundOrderNotFoundError
    already_exists_error = InboundOrderNumberAlreadyExistsError
    business_key = "order_number"
    references = {
        "employee_id": (EmployeeRepository, EmployeeNotFoundError),
        "product_batch_id": (ProductBatchRepository, ProductBatchNotFoundError),
        "warehouse_id": (WarehouseRepository, WarehouseNotFoundError),
    }
