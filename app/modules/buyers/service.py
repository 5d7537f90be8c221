# app/modules/buyers/service.py
from typing import List, Optional, Union

from app.core.exceptions import AlreadyExistsError, NotFoundError
from app.shared.service import BaseService
from .repository import BuyerRepository
from .schemas import BuyerResponse, BuyerPurchaseOrdersReport

class BuyerNotFoundError(NotFoundError):
    default_message = "buyer not found"

class BuyerCardNumberAlreadyExistsError(AlreadyExistsError):
    default_message = "buyer card number id already exists"

class BuyerService(BaseService[BuyerResponse]):
    """
    Servicio de compradores
    """

    entity_name = "buyer"
    repository_class = BuyerRepository
    response_schema = BuyerResponse
    not_found_error = BuyerNotFoundError
    already_exists_error = BuyerCardNumberAlreadyExistsError
    business_key = "card_number_id"

    def report_purchase_orders(
        self, buyer_id: Optional[int] = None
    ) -> Union[BuyerPurchaseOrdersReport, List[BuyerPurchaseOrdersReport]]:
        rows = self.repository.count_purchase_orders(buyer_id)
        reports = [BuyerPurchaseOrdersReport(**row._asdict()) for row in rows]
        return self._single_or_all(reports, buyer_id)
