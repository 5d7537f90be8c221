# app/modules/product_batches/repository.py
from app.shared.database.models import ProductBatch
from app.shared.repository import BaseRepository

class ProductBatchRepository(BaseRepository[ProductBatch]):
    """Acceso a datos de lotes"""
    model = ProductBatch
