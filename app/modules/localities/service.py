# app/modules/localities/service.py
from typing import List, Optional, Union

from app.core.exceptions import AlreadyExistsError, NotFoundError
from app.shared.service import BaseService
from .repository import LocalityRepository
from .schemas import LocalityResponse, LocalitySellersReport, LocalityCarriersReport

class LocalityNotFoundError(NotFoundError):
    default_message = "locality not found"

class LocalityAlreadyExistsError(AlreadyExistsError):
    default_message = "locality name already exists"

class LocalityService(BaseService[LocalityResponse]):
    """
    Servicio de localidades y sus reportes de vendedores/transportistas
    """

    entity_name = "locality"
    repository_class = LocalityRepository
    response_schema = LocalityResponse
    not_found_error = LocalityNotFoundError
    already_exists_error = LocalityAlreadyExistsError
    business_key = "locality_name"

    def report_sellers(
        self, locality_id: Optional[int] = None
    ) -> Union[LocalitySellersReport, List[LocalitySellersReport]]:
        rows = self.repository.count_sellers(locality_id)
        reports = [LocalitySellersReport(**row._asdict()) for row in rows]
        return self._single_or_all(reports, locality_id)

    def report_carriers(
        self, locality_id: Optional[int] = None
    ) -> Union[LocalityCarriersReport, List[LocalityCarriersReport]]:
        rows = self.repository.count_carriers(locality_id)
        reports = [LocalityCarriersReport(**row._asdict()) for row in rows]
        return self._single_or_all(reports, locality_id)
