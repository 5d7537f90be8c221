# app/modules/products/repository.py
from typing import List, Optional
from sqlalchemy import func

from app.shared.database.models import Product, ProductRecord
from app.shared.repository import BaseRepository

class ProductRepository(BaseRepository[Product]):
    """
    Repositorio de productos
    """
    model = Product

    def count_records(self, product_id: Optional[int] = None) -> List:
        """Registros de precio por producto (0 si no tiene registros)"""
        query = self.db.query(
            Product.id.label('product_id'),
            Product.description,
            func.count(ProductRecord.id).label('records_count')
        ).outerjoin(ProductRecord, ProductRecord.product_id == Product.id)\
         .group_by(Product.id, Product.description)

        if product_id is not None:
            query = query.filter(Product.id == product_id)

        return query.order_by(Product.id).all()
