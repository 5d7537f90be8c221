# app/modules/purchase_orders/repository.py
from app.shared.database.models import PurchaseOrder
from app.shared.repository import BaseRepository

class PurchaseOrderRepository(BaseRepository[PurchaseOrder]):
    model = PurchaseOrder
