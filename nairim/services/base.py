"""
Общая логика сервисов сущностей: чтение с учетом мягкого удаления,
каскадное удаление и восстановление, проверки уникальности.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel
from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from nairim.database import transaction
from nairim.exceptions import ConflictError, EntityNotFoundError, InvalidEntityStateError
from nairim.models import Address, Contact
from nairim.models.mixins import utcnow
from nairim.services.query import EntityQuery, ListParams, Page, QueryPlanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cascade:
    """Зависимая таблица, которая удаляется и восстанавливается вместе с родителем"""
    model: Any
    foreign_key: str


class SoftDeleteService:
    """
    Базовый сервис сущности с мягким удалением.

    Наследник задает модель, описание запроса списка и список каскадов.
    """
    entity_name: str = "Entity"
    query: EntityQuery
    cascades: Tuple[Cascade, ...] = ()

    def __init__(self, db: Session):
        self.db = db

    @property
    def model(self):
        return self.query.model

    def list(self, params: ListParams) -> Page:
        return QueryPlanner(self.db, self.query).list(params)

    def filter_options(self) -> Dict[str, Any]:
        return QueryPlanner(self.db, self.query).filter_options()

    def get(self, entity_id: str, include_deleted: bool = False):
        """
        Возвращает запись по ID.

        Raises:
            EntityNotFoundError: записи нет или она удалена
        """
        statement = select(self.model).where(self.model.id == entity_id).options(*self.query.load_options)
        obj = self.db.scalar(statement)
        if obj is None or (obj.deleted_at is not None and not include_deleted):
            raise EntityNotFoundError(self.entity_name, entity_id)
        return obj

    def delete(self, entity_id: str):
        """Мягко удаляет запись и все объявленные зависимые строки одной транзакцией"""
        obj = self.get(entity_id)
        deleted_at = utcnow()
        with transaction(self.db):
            obj.deleted_at = deleted_at
            for cascade in self.cascades:
                self.db.execute(
                    update(cascade.model)
                    .where(
                        getattr(cascade.model, cascade.foreign_key) == obj.id,
                        cascade.model.deleted_at.is_(None),
                    )
                    .values(deleted_at=deleted_at)
                )
        logger.info(f"{self.entity_name} {entity_id} deleted")
        return obj

    def restore(self, entity_id: str):
        """
        Восстанавливает запись и зависимые строки, удаленные вместе с ней.
        Строки, удаленные раньше отдельно, остаются удаленными.

        Raises:
            InvalidEntityStateError: запись не удалена
        """
        obj = self.get(entity_id, include_deleted=True)
        if obj.deleted_at is None:
            raise InvalidEntityStateError(f"{self.entity_name} {entity_id} is not deleted")

        deleted_at = obj.deleted_at
        with transaction(self.db):
            for cascade in self.cascades:
                self.db.execute(
                    update(cascade.model)
                    .where(
                        getattr(cascade.model, cascade.foreign_key) == obj.id,
                        cascade.model.deleted_at == deleted_at,
                    )
                    .values(deleted_at=None)
                )
            obj.deleted_at = None
        logger.info(f"{self.entity_name} {entity_id} restored")
        return obj

    def ensure_unique(
        self,
        column: str,
        value: Optional[str],
        exclude_id: Optional[str] = None,
        case_insensitive: bool = False,
    ) -> None:
        """Проверяет, что среди живых записей нет такого значения"""
        if value is None or value == "":
            return
        attr = getattr(self.model, column)
        condition = func.lower(attr) == value.lower() if case_insensitive else attr == value
        statement = select(self.model.id).where(condition, self.model.deleted_at.is_(None))
        if exclude_id:
            statement = statement.where(self.model.id != exclude_id)
        if self.db.scalar(statement.limit(1)) is not None:
            raise ConflictError(f"{self.entity_name} with {column} '{value}' already exists")

    def require(self, model, entity_id: Optional[str], name: str) -> None:
        """Проверяет, что связанная запись существует и не удалена"""
        if entity_id is None:
            return
        found = self.db.scalar(
            select(model.id).where(model.id == entity_id, model.deleted_at.is_(None))
        )
        if found is None:
            raise EntityNotFoundError(name, entity_id)

    @staticmethod
    def plain(data: Dict[str, Any]) -> Dict[str, Any]:
        """Значения перечислений в строки для колонок String"""
        return {key: value.value if isinstance(value, enum.Enum) else value for key, value in data.items()}

    @classmethod
    def apply_changes(cls, obj, data: Dict[str, Any]) -> None:
        for key, value in cls.plain(data).items():
            setattr(obj, key, value)

    def detach_links(self, link_model, foreign_key: str, parent_id: str) -> None:
        """Мягко удаляет все живые связи родителя с адресами или контактами"""
        self.db.execute(
            update(link_model)
            .where(getattr(link_model, foreign_key) == parent_id, link_model.deleted_at.is_(None))
            .values(deleted_at=utcnow())
        )

    def attach_addresses(self, link_model, foreign_key: str, parent_id: str, addresses: Iterable[BaseModel]) -> None:
        for item in addresses:
            self.db.add(link_model(**{foreign_key: parent_id}, address=Address(**item.model_dump())))

    def attach_contacts(self, link_model, foreign_key: str, parent_id: str, contacts: Iterable[BaseModel]) -> None:
        for item in contacts:
            self.db.add(link_model(**{foreign_key: parent_id}, contact=Contact(**item.model_dump())))
