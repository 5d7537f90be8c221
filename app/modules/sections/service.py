# app/modules/sections/service.py
from typing import Any, Dict, List, Optional, Union

from app.core.exceptions import AlreadyExistsError, NotFoundError, ValidationFailedError
from app.modules.warehouses.repository import WarehouseRepository
from app.modules.warehouses.service import WarehouseNotFoundError
from app.shared.service import BaseService
from .repository import SectionRepository
from .schemas import SectionResponse, SectionProductsReport

class SectionNotFoundError(NotFoundError):
    default_message = "section not found"

class SectionNumberAlreadyExistsError(AlreadyExistsError):
    default_message = "section number already exists"

class SectionCapacityError(ValidationFailedError):
    default_message = "section capacity is inconsistent"

class SectionService(BaseService[SectionResponse]):
    """
    Servicio de secciones

    Reglas:
    - section_number único
    - El almacén debe existir
    - minimum_capacity <= maximum_capacity y current_capacity <= maximum_capacity
    """

    entity_name = "section"
    repository_class = SectionRepository
    response_schema = SectionResponse
    not_found_error = SectionNotFoundError
    already_exists_error = SectionNumberAlreadyExistsError
    business_key = "section_number"
    references = {
        "warehouse_id": (WarehouseRepository, WarehouseNotFoundError),
    }

    def validate(self, data: Dict[str, Any]) -> None:
        if data["minimum_capacity"] > data["maximum_capacity"]:
            raise SectionCapacityError("minimum_capacity cannot exceed maximum_capacity")
        if data["current_capacity"] > data["maximum_capacity"]:
            raise SectionCapacityError("current_capacity cannot exceed maximum_capacity")

    def report_products(
        self, section_id: Optional[int] = None
    ) -> Union[SectionProductsReport, List[SectionProductsReport]]:
        rows = self.repository.count_products(section_id)
        reports = [SectionProductsReport(**row._asdict()) for row in rows]
        return self._single_or_all(reports, section_id)
