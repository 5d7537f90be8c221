# app/modules/carriers/service.py
from app.core.exceptions import AlreadyExistsError, NotFoundError
from app.modules.localities.repository import LocalityRepository
from app.modules.localities.service import LocalityNotFoundError
from app.shared.service import BaseService
from .repository import CarrierRepository
from .schemas import CarrierResponse

class CarrierNotFoundError(NotFoundError):
    default_message = "carrier not found"

class CarrierCidAlreadyExistsError(AlreadyExistsError):
    default_message = "carrier cid already exists"

class CarrierService(BaseService[CarrierResponse]):
    entity_name = "carrier"
    repository_class = CarrierRepository
    response_schema = CarrierResponse
    not_found_error = CarrierNotFoundError
    already_exists_error = CarrierCidAlreadyExistsError
    business_key = "cid"
    references = {
        "locality_id": (LocalityRepository, LocalityNotFoundError),
    }
