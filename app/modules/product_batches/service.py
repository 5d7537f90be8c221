# app/modules/product_batches/service.py
from typing import Any, Dict

from app.core.exceptions import AlreadyExistsError, NotFoundError, ValidationFailedError
from app.modules.products.repository import ProductRepository
from app.modules.products.service import ProductNotFoundError
from app.modules.sections.repository import SectionRepository
from app.modules.sections.service import SectionNotFoundError
from app.shared.service import BaseService
from .repository import ProductBatchRepository
from .schemas import ProductBatchResponse

class ProductBatchNotFoundError(NotFoundError):
    default_message = "product batch not found"

class BatchNumberAlreadyExistsError(AlreadyExistsError):
    default_message = "batch number already exists"

class ProductBatchInvalidError(ValidationFailedError):
    default_message = "product batch is inconsistent"

class ProductBatchService(BaseService[ProductBatchResponse]):
    """
    Servicio de lotes de producto

    Reglas:
    - batch_number único
    - Producto y sección existentes
    - manufacturing_date <= due_date
    - current_quantity <= initial_quantity
    """

    entity_name = "product batch"
    repository_class = ProductBatchRepository
    response_schema = ProductBatchResponse
    not_found_error = ProductBatchNotFoundError
    already_exists_error = BatchNumberAlreadyExistsError
    business_key = "batch_number"
    references = {
        "product_id": (ProductRepository, ProductNotFoundError),
        "section_id": (SectionRepository, SectionNotFoundError),
    }

    def validate(self, data: Dict[str, Any]) -> None:
        if data["manufacturing_date"] > data["due_date"]:
            raise ProductBatchInvalidError("manufacturing_date cannot be after due_date")
        if data["current_quantity"] > data["initial_quantity"]:
            raise ProductBatchInvalidError("current_quantity cannot exceed initial_quantity")
