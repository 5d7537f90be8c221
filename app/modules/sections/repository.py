# app/modules/sections/repository.py
from typing import List, Optional
from sqlalchemy import func

from app.shared.database.models import Section, ProductBatch
from app.shared.repository import BaseRepository

class SectionRepository(BaseRepository[Section]):
    model = Section

    def count_products(self, section_id: Optional[int] = None) -> List:
        """
        Suma de current_quantity de los lotes por sección.
        Secciones sin lotes aparecen con 0.
        """
        query = self.db.query(
            Section.id.label('section_id'),
            Section.section_number,
            func.coalesce(func.sum(ProductBatch.current_quantity), 0).label('products_count')
        ).outerjoin(ProductBatch, ProductBatch.section_id == Section.id)\
         .group_by(Section.id, Section.section_number)

        if section_id is not None:
            query = query.filter(Section.id == section_id)

        return query.order_by(Section.id).all()
