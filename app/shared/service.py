# app/shared/service.py
import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, Type, TypeVar
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import AlreadyExistsError, NotFoundError
from .repository import BaseRepository

logger = logging.getLogger(__name__)

# SQLSTATE unique_violation (PostgreSQL) y mensaje equivalente de SQLite
_UNIQUE_VIOLATION_CODE = "23505"
_SQLITE_UNIQUE_MESSAGE = "UNIQUE constraint failed"


def is_unique_violation(exc: IntegrityError) -> bool:
    if getattr(exc.orig, "pgcode", None) == _UNIQUE_VIOLATION_CODE:
        return True
    return _SQLITE_UNIQUE_MESSAGE in str(exc.orig)


SchemaT = TypeVar("SchemaT", bound=BaseModel)

class BaseService(Generic[SchemaT]):
    """
    Servicio base: reglas comunes de creación, actualización parcial y borrado.

    Cada módulo declara:
    - repository_class: repositorio de la entidad
    - response_schema: esquema de salida (from_attributes)
    - not_found_error / already_exists_error: errores del módulo
    - business_key: columna que debe ser única
    - references: columna FK -> (repositorio referenciado, error si no existe)
    """

    entity_name: str = "entity"
    repository_class: Type[BaseRepository]
    response_schema: Type[SchemaT]
    not_found_error: Type[NotFoundError] = NotFoundError
    already_exists_error: Optional[Type[AlreadyExistsError]] = None
    business_key: Optional[str] = None
    references: Dict[str, Tuple[Type[BaseRepository], Type[NotFoundError]]] = {}

    def __init__(self, db: Session):
        self.db = db
        self.repository = self.repository_class(db)

    # ==================== CRUD ====================

    def get_all(self) -> List[SchemaT]:
        return [self._to_response(entity) for entity in self.repository.get_all()]

    def get(self, entity_id: int) -> SchemaT:
        return self._to_response(self._get_or_raise(entity_id))

    def create(self, payload: BaseModel) -> SchemaT:
        data = payload.model_dump()

        self._check_business_key(data)
        self._check_references(data)
        self.validate(data)

        entity = self._persist(lambda: self.repository.create(data))
        logger.info(f"Created {self.entity_name} #{entity.id}")
        return self._to_response(entity)

    def update(self, entity_id: int, payload: BaseModel) -> SchemaT:
        """
        Actualización parcial: solo se aplican los campos presentes y no nulos.
        Un 0 o "" explícito es un valor válido y se aplica.
        """
        entity = self._get_or_raise(entity_id)

        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None and getattr(entity, key) != value
        }

        if not changes:
            return self._to_response(entity)

        self._check_business_key(changes, exclude_id=entity_id)
        self._check_references(changes)

        merged = self._as_dict(entity)
        merged.update(changes)
        self.validate(merged)

        entity = self._persist(lambda: self.repository.update(entity, changes))
        logger.info(f"Updated {self.entity_name} #{entity_id}: {sorted(changes)}")
        return self._to_response(entity)

    def delete(self, entity_id: int) -> None:
        if not self.repository.delete(entity_id):
            raise self.not_found_error()
        logger.info(f"Deleted {self.entity_name} #{entity_id}")

    # ==================== REGLAS ====================

    def validate(self, data: Dict[str, Any]) -> None:
        """Reglas entre campos del registro completo; los módulos la sobreescriben"""

    def _check_business_key(self, data: Dict[str, Any], exclude_id: Optional[int] = None):
        if not self.business_key or self.business_key not in data:
            return
        if self.repository.exists_by(self.business_key, data[self.business_key], exclude_id=exclude_id):
            raise self.already_exists_error()

    def _check_references(self, data: Dict[str, Any]):
        for field, (repository_class, error) in self.references.items():
            if field in data and not repository_class(self.db).exists(data[field]):
                raise error()

    # ==================== HELPERS ====================

    def _get_or_raise(self, entity_id: int):
        entity = self.repository.get(entity_id)
        if not entity:
            raise self.not_found_error()
        return entity

    def _persist(self, operation: Callable[[], Any]):
        """La restricción única del motor es la autoridad ante escrituras concurrentes"""
        try:
            return operation()
        except IntegrityError as exc:
            if self.already_exists_error is None or not is_unique_violation(exc):
                raise
            logger.warning(f"Integrity error persisting {self.entity_name}")
            raise self.already_exists_error()

    def _single_or_all(self, reports: List[Any], entity_id: Optional[int]):
        """Un reporte filtrado por id devuelve exactamente una fila"""
        if entity_id is None:
            return reports
        if not reports:
            raise self.not_found_error()
        return reports[0]

    def _as_dict(self, entity) -> Dict[str, Any]:
        return {
            column: getattr(entity, column)
            for column in entity.__table__.columns.keys()
        }

    def _to_response(self, entity) -> SchemaT:
        return self.response_schema.model_validate(entity)
