# app/modules/sellers/service.py
from app.core.exceptions import AlreadyExistsError, NotFoundError
from app.modules.localities.repository import LocalityRepository
from app.modules.localities.service import LocalityNotFoundError
from app.shared.service import BaseService
from .repository import SellerRepository
from .schemas import SellerResponse

class SellerNotFoundError(NotFoundError):
    default_message = "seller not found"

class SellerCidAlreadyExistsError(AlreadyExistsError):
    default_message = "seller cid already exists"

class SellerService(BaseService[SellerResponse]):
    """
    Servicio de vendedores

    - cid único entre vendedores
    - La localidad referenciada debe existir
    """

    entity_name = "seller"
    repository_class = SellerRepository
    response_schema = SellerResponse
    not_found_error = SellerNotFoundError
    already_exists_error = SellerCidAlreadyExistsError
    business_key = "cid"
    references = {
        "locality_id": (LocalityRepository, LocalityNotFoundError),
    }
