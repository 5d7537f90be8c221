# app/modules/purchase_orders/service.py
from app.core.exceptions import AlreadyExistsError, NotFoundError
from app.modules.buyers.repository import BuyerRepository
from app.modules.buyers.service import BuyerNotFoundError
from app.modules.product_records.repository import ProductRecordRepository
from app.modules.product_records.service import ProductRecordNotFoundError
from app.shared.service import BaseService
from .repository import PurchaseOrderRepository
from .schemas import PurchaseOrderResponse

class PurchaseOrderNotFoundError(NotFoundError):
    default_message = "purchase order not found"

class PurchaseOrderNumberAlreadyExistsError(AlreadyExistsError):
    default_message = "purchase order number already exists"

class PurchaseOrderService(BaseService[PurchaseOrderResponse]):
    """
    Servicio de órdenes de compra

    - order_number único
    - Comprador y registro de precio existentes
    """

    entity_name = "purchase order"
    repository_class = PurchaseOrderRepository
    response_schema = PurchaseOrderResponse
    not_found_error = PurchaseOrderNotFoundError
    already_exists_error = PurchaseOrderNumberAlreadyExistsError
    business_key = "order_number"
    references = {
        "buyer_id": (BuyerRepository, BuyerNotFoundError),
        "product_record_id": (ProductRecordRepository, ProductRecordNotFoundError),
    }
