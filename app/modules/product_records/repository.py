# app/modules/product_records/repository.py
from app.shared.database.models import ProductRecord
from app.shared.repository import BaseRepository

class ProductRecordRepository(BaseRepository[ProductRecord]):
    model = ProductRecord
