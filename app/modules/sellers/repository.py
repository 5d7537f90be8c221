# app/modules/sellers/repository.py
from app.shared.database.models import Seller
from app.shared.repository import BaseRepository

class SellerRepository(BaseRepository[Seller]):
    """Acceso a datos de vendedores"""
    model = Seller
