# app/shared/repository.py
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config.database import Base

ModelT = TypeVar("ModelT", bound=Base)

class BaseRepository(Generic[ModelT]):
    """
    Repositorio base con las operaciones CRUD comunes a todas las entidades.

    Los errores del motor se propagan sin modificar; solo se hace rollback
    de la sesión para dejarla utilizable.
    """

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    # ==================== LECTURA ====================

    def get_all(self) -> List[ModelT]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def get(self, entity_id: int) -> Optional[ModelT]:
        return self.db.query(self.model)\
            .filter(self.model.id == entity_id).first()

    def exists(self, entity_id: int) -> bool:
        return self.db.query(self.model.id)\
            .filter(self.model.id == entity_id).first() is not None

    def exists_by(self, field: str, value: Any, exclude_id: Optional[int] = None) -> bool:
        """Verificar si otro registro ya usa el valor en la columna indicada"""
        query = self.db.query(self.model.id)\
            .filter(getattr(self.model, field) == value)

        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)

        return query.first() is not None

    # ==================== ESCRITURA ====================

    def create(self, data: Dict[str, Any]) -> ModelT:
        entity = self.model(**data)
        self.db.add(entity)
        self._commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelT, changes: Dict[str, Any]) -> ModelT:
        for key, value in changes.items():
            setattr(entity, key, value)
        self._commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> bool:
        """Eliminar por id; retorna False si no existía"""
        deleted = self.db.query(self.model)\
            .filter(self.model.id == entity_id)\
            .delete(synchronize_session=False)
        self._commit()
        return deleted > 0

    def _commit(self):
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
