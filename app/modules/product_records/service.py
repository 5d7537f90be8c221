# app/modules/product_records/service.py
from app.core.exceptions import NotFoundError
from app.modules.products.repository import ProductRepository
from app.modules.products.service import ProductNotFoundError
from app.shared.service import BaseService
from .repository import ProductRecordRepository
from .schemas import ProductRecordResponse

class ProductRecordNotFoundError(NotFoundError):
    default_message = "product record not found"

class ProductRecordService(BaseService[ProductRecordResponse]):
    """
    Servicio de registros de precio

    No tiene clave de negocio; un producto acumula varios registros.
    """

    entity_name = "product record"
    repository_class = ProductRecordRepository
    response_schema = ProductRecordResponse
    not_found_error = ProductRecordNotFoundError
    references = {
        "product_id": (ProductRepository, ProductNotFoundError),
    }
