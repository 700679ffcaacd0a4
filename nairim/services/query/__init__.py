"""
Динамические запросы списков: поиск, фильтры, сортировка, пагинация.
Выбирает между запросом к БД и обработкой в памяти
"""
from nairim.services.query.normalize import normalize
from nairim.services.query.paths import safe_get
from nairim.services.query.fields import (
    FieldKind, FieldSpec, FieldMapping, SearchProfile, ValueType,
    direct, relation, address, contact, field_mapping, timestamps, address_fields, contact_fields,
)
from nairim.services.query.filters import FilterCondition, try_parse_filter, parse_filters
from nairim.services.query.memory import InMemorySearchAndSort
from nairim.services.query.params import ListParams, Page
from nairim.services.query.planner import EntityQuery, QueryPlanner, MEMORY_PLAN, PUSHDOWN_PLAN

__all__ = [
    "normalize",
    "safe_get",
    "FieldKind", "FieldSpec", "FieldMapping", "SearchProfile", "ValueType",
    "direct", "relation", "address", "contact", "field_mapping", "timestamps", "address_fields", "contact_fields",
    "FilterCondition", "try_parse_filter", "parse_filters",
    "InMemorySearchAndSort",
    "ListParams", "Page",
    "EntityQuery", "QueryPlanner", "MEMORY_PLAN", "PUSHDOWN_PLAN",
]
