# app/modules/warehouses/service.py
from app.core.exceptions import AlreadyExistsError, NotFoundError
from app.modules.localities.repository import LocalityRepository
from app.modules.localities.service import LocalityNotFoundError
from app.shared.service import BaseService
from .repository import WarehouseRepository
from .schemas import WarehouseResponse

class WarehouseNotFoundError(NotFoundError):
    default_message = "warehouse not found"

class WarehouseCodeAlreadyExistsError(AlreadyExistsError):
    default_message = "warehouse code already exists"

class WarehouseService(BaseService[WarehouseResponse]):
    """
    Servicio de almacenes

    El código del almacén es único; al actualizarlo se verifica contra
    los demás almacenes, no contra sí mismo.
    """

    entity_name = "warehouse"
    repository_class = WarehouseRepository
    response_schema = WarehouseResponse
    not_found_error = WarehouseNotFoundError
    already_exists_error = WarehouseCodeAlreadyExistsError
    business_key = "warehouse_code"
    references = {
        "locality_id": (LocalityRepository, LocalityNotFoundError),
    }
