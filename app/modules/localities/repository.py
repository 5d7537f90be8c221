# app/modules/localities/repository.py
from typing import List, Optional
from sqlalchemy import func

from app.shared.database.models import Locality, Seller, Carrier
from app.shared.repository import BaseRepository

class LocalityRepository(BaseRepository[Locality]):
    model = Locality

    # ==================== REPORTES ====================

    def count_sellers(self, locality_id: Optional[int] = None) -> List:
        """Vendedores por localidad, incluyendo localidades sin vendedores"""
        query = self.db.query(
            Locality.id.label('locality_id'),
            Locality.locality_name,
            func.count(Seller.id).label('sellers_count')
        ).outerjoin(Seller, Seller.locality_id == Locality.id)\
         .group_by(Locality.id, Locality.locality_name)

        if locality_id is not None:
            query = query.filter(Locality.id == locality_id)

        return query.order_by(Locality.id).all()

    def count_carriers(self, locality_id: Optional[int] = None) -> List:
        """Transportistas por localidad, incluyendo localidades sin transportistas"""
        query = self.db.query(
            Locality.id.label('locality_id'),
            Locality.locality_name,
            func.count(Carrier.id).label('carriers_count')
        ).outerjoin(Carrier, Carrier.locality_id == Locality.id)\
         .group_by(Locality.id, Locality.locality_name)

        if locality_id is not None:
            query = query.filter(Locality.id == locality_id)

        return query.order_by(Locality.id).all()
