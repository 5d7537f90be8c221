# app/modules/buyers/repository.py
from typing import List, Optional
from sqlalchemy import func

from app.shared.database.models import Buyer, PurchaseOrder
from app.shared.repository import BaseRepository

class BuyerRepository(BaseRepository[Buyer]):
    model = Buyer

    def count_purchase_orders(self, buyer_id: Optional[int] = None) -> List:
        """Órdenes de compra por comprador (LEFT JOIN, 0 si no tiene)"""
        query = self.db.query(
            Buyer.id,
            Buyer.card_number_id,
            Buyer.first_name,
            Buyer.last_name,
            func.count(PurchaseOrder.id).label('purchase_orders_count')
        ).outerjoin(PurchaseOrder, PurchaseOrder.buyer_id == Buyer.id)\
         .group_by(Buyer.id, Buyer.card_number_id, Buyer.first_name, Buyer.last_name)

        if buyer_id is not None:
            query = query.filter(Buyer.id == buyer_id)

        return query.order_by(Buyer.id).all()
