"""
Декларации полей сущностей для сортировки, фильтрации и поиска.

Таблица полей неизменяемая и создается один раз на сущность.
Ее читают и построитель запросов к БД, и обработка в памяти.
"""
import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class FieldKind(str, enum.Enum):
    DIRECT = "direct"
    RELATION = "relation"
    ADDRESS = "address"
    CONTACT = "contact"


class ValueType(str, enum.Enum):
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    KEY = "key"
    ENUM = "enum"


NATIVE_ORDER_TYPES = frozenset({
    ValueType.INTEGER, ValueType.DECIMAL, ValueType.BOOLEAN, ValueType.DATE, ValueType.DATETIME,
})

ADDRESS_SEARCH_FIELDS = ("street", "district", "city", "state", "zip_code")
CONTACT_SEARCH_FIELDS = ("contact", "phone", "cellphone", "email")


@dataclass(frozen=True)
class FieldSpec:
    """Описание одного внешнего поля"""
    kind: FieldKind
    column: str
    path: Optional[str] = None
    value_type: ValueType = ValueType.TEXT
    sortable: bool = True
    filterable: bool = True
    facet: bool = False
    choices: Tuple[str, ...] = ()

    @property
    def is_direct(self) -> bool:
        return self.kind == FieldKind.DIRECT

    @property
    def read_path(self) -> str:
        """Путь для чтения значения из загруженной записи"""
        return self.column if self.is_direct else self.path

    @property
    def relation_parts(self) -> Tuple[str, ...]:
        """Путь по связям ORM без числовых индексов: ("addresses", "address", "city")"""
        return tuple(part for part in self.read_path.split(".") if not part.isdigit())


def direct(column: str, value_type: ValueType = ValueType.TEXT, **options) -> FieldSpec:
    return FieldSpec(FieldKind.DIRECT, column, value_type=value_type, **options)


def relation(path: str, **options) -> FieldSpec:
    return FieldSpec(FieldKind.RELATION, path.rsplit(".", 1)[-1], path=path, **options)


def address(column: str, **options) -> FieldSpec:
    return FieldSpec(FieldKind.ADDRESS, column, path=f"addresses.0.address.{column}", **options)


def contact(column: str, **options) -> FieldSpec:
    return FieldSpec(FieldKind.CONTACT, column, path=f"contacts.0.contact.{column}", **options)


FieldMapping = Mapping[str, FieldSpec]


def field_mapping(**fields: FieldSpec) -> FieldMapping:
    return MappingProxyType(dict(fields))


def timestamps() -> dict:
    return {
        "created_at": direct("created_at", ValueType.DATETIME),
        "updated_at": direct("updated_at", ValueType.DATETIME),
    }


def address_fields(facets: Tuple[str, ...] = ()) -> dict:
    return {
        name: address(name, facet=name in facets)
        for name in ("city", "state", "district", "street", "zip_code")
    }


@dataclass(frozen=True)
class SearchProfile:
    """
    Какие значения склеиваются в строку полнотекстового поиска:
    прямые поля, затем связанные, затем все адреса и контакты
    """
    direct: Tuple[str, ...] = ()
    relations: Tuple[str, ...] = ()
    addresses: Optional[str] = None
    contacts: Optional[str] = None


def contact_fields(**options) -> dict:
    return {
        "contact_name": contact("contact", **options),
        "phone": contact("phone", **options),
        "cellphone": contact("cellphone", **options),
        "email": contact("email", **options),
    }
