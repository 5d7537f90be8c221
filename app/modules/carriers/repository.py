# app/modules/carriers/repository.py
from app.shared.database.models import Carrier
from app.shared.repository import BaseRepository

class CarrierRepository(BaseRepository[Carrier]):
    model = Carrier
