# app/modules/warehouses/repository.py
from app.shared.database.models import Warehouse
from app.shared.repository import BaseRepository

class WarehouseRepository(BaseRepository[Warehouse]):
    """Acceso a datos de almacenes"""
    model = Warehouse
