# app/modules/inbound_orders/repository.py
from app.shared.database.models import InboundOrder
from app.shared.repository import BaseRepository

class InboundOrderRepository(BaseRepository[InboundOrder]):
    model = InboundOrder
