# app/modules/products/service.py
from typing import List, Optional, Union

from app.core.exceptions import AlreadyExistsError, NotFoundError
from app.modules.sellers.repository import SellerRepository
from app.modules.sellers.service import SellerNotFoundError
from app.shared.service import BaseService
from .repository import ProductRepository
from .schemas import ProductResponse, ProductRecordsReport

class ProductNotFoundError(NotFoundError):
    default_message = "product not found"

class ProductCodeAlreadyExistsError(AlreadyExistsError):
    default_message = "product code already exists"

class ProductService(BaseService[ProductResponse]):
    """
    Servicio de productos

    - product_code único
    - El vendedor referenciado debe existir
    """

    entity_name = "product"
    repository_class = ProductRepository
    response_schema = ProductResponse
    not_found_error = ProductNotFoundError
    already_exists_error = ProductCodeAlreadyExistsError
    business_key = "product_code"
    references = {
        "seller_id": (SellerRepository, SellerNotFoundError),
    }

    def report_records(
        self, product_id: Optional[int] = None
    ) -> Union[ProductRecordsReport, List[ProductRecordsReport]]:
        rows = self.repository.count_records(product_id)
        reports = [ProductRecordsReport(**row._asdict()) for row in rows]
        return self._single_or_all(reports, product_id)
