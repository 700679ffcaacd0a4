"""
Типизированные условия фильтрации.

Сырые значения из запроса разбираются один раз в закрытый набор
условий. Нераспознанное значение не ошибка: try_parse_filter возвращает
None и фильтр просто не применяется.
"""
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from sqlalchemy import and_, inspect as sa_inspect
from sqlalchemy.sql.elements import ColumnElement

from nairim.services.query.fields import FieldMapping, FieldSpec, ValueType

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59, 999000)


def contains(column, value: str) -> ColumnElement:
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return column.ilike(f"%{escaped}%", escape="\\")


def relation_clause(model, parts: Tuple[str, ...], leaf: Callable[[Any], ColumnElement]) -> ColumnElement:
    """
    Строит условие "есть связанная запись, удовлетворяющая leaf"
    по цепочке связей ORM: any() для коллекций, has() для ссылок.
    """
    if not parts:
        return leaf(model)
    rel = sa_inspect(model).relationships[parts[0]]
    inner = relation_clause(rel.mapper.class_, parts[1:], leaf)
    attr = getattr(model, parts[0])
    return attr.any(inner) if rel.uselist else attr.has(inner)


@dataclass(frozen=True)
class TextContains:
    column: str
    value: str

    def to_clause(self, model) -> ColumnElement:
        return contains(getattr(model, self.column), self.value)


@dataclass(frozen=True)
class NumberEquals:
    column: str
    value: Union[int, float]

    def to_clause(self, model) -> ColumnElement:
        return getattr(model, self.column) == self.value


@dataclass(frozen=True)
class BooleanEquals:
    column: str
    value: bool

    def to_clause(self, model) -> ColumnElement:
        return getattr(model, self.column).is_(self.value)


@dataclass(frozen=True)
class ValueEquals:
    column: str
    value: str

    def to_clause(self, model) -> ColumnElement:
        return getattr(model, self.column) == self.value


@dataclass(frozen=True)
class DateRange:
    column: str
    start: Optional[datetime]
    end: Optional[datetime]
    calendar: bool = False

    def to_clause(self, model) -> ColumnElement:
        column = getattr(model, self.column)
        bounds = []
        if self.start is not None:
            bounds.append(column >= (self.start.date() if self.calendar else self.start))
        if self.end is not None:
            bounds.append(column <= (self.end.date() if self.calendar else self.end))
        return and_(*bounds)


@dataclass(frozen=True)
class RelationTextContains:
    path: Tuple[str, ...]
    value: str

    def to_clause(self, model) -> ColumnElement:
        column = self.path[-1]
        return relation_clause(model, self.path[:-1], lambda target: contains(getattr(target, column), self.value))


FilterCondition = Union[TextContains, NumberEquals, BooleanEquals, ValueEquals, DateRange, RelationTextContains]


def _text(raw: Any) -> str:
    return str(raw).strip()


def _parse_day(raw: Any) -> Optional[datetime]:
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, date):
        value = datetime.combine(raw, time.min)
    else:
        try:
            value = datetime.fromisoformat(_text(raw))
        except ValueError:
            return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _parse_date_range(field_spec: FieldSpec, raw: Any) -> Optional[DateRange]:
    calendar = field_spec.value_type == ValueType.DATE

    if isinstance(raw, Mapping):
        start = _parse_day(raw["from"]) if raw.get("from") else None
        end = _parse_day(raw["to"]) if raw.get("to") else None
        if start is None and end is None:
            return None
        return DateRange(
            field_spec.column,
            start,
            datetime.combine(end.date(), END_OF_DAY) if end else None,
            calendar,
        )

    day = _parse_day(raw)
    if day is None:
        return None
    return DateRange(
        field_spec.column,
        datetime.combine(day.date(), time.min),
        datetime.combine(day.date(), END_OF_DAY),
        calendar,
    )


def try_parse_filter(field_spec: Optional[FieldSpec], raw: Any) -> Optional[FilterCondition]:
    """
    Преобразует сырое значение фильтра в условие.

    Args:
        field_spec: Описание поля (None для неизвестного поля)
        raw: Значение из запроса: строка, число, bool или {"from", "to"}

    Returns:
        Условие или None, если значение пустое или не разбирается
    """
    if field_spec is None or not field_spec.filterable or raw is None:
        return None
    if isinstance(raw, str) and not raw.strip():
        return None

    if not field_spec.is_direct:
        return RelationTextContains(field_spec.relation_parts, _text(raw))

    value_type = field_spec.value_type

    if value_type in (ValueType.DATE, ValueType.DATETIME):
        return _parse_date_range(field_spec, raw)

    if isinstance(raw, Mapping):
        return None

    if value_type == ValueType.TEXT:
        return TextContains(field_spec.column, _text(raw))

    if value_type == ValueType.INTEGER:
        try:
            return NumberEquals(field_spec.column, int(_text(raw)))
        except ValueError:
            return None

    if value_type == ValueType.DECIMAL:
        try:
            number = float(_text(raw))
        except ValueError:
            return None
        return NumberEquals(field_spec.column, number) if math.isfinite(number) else None

    if value_type == ValueType.BOOLEAN:
        if isinstance(raw, bool):
            return BooleanEquals(field_spec.column, raw)
        lowered = _text(raw).lower()
        if lowered in ("true", "false"):
            return BooleanEquals(field_spec.column, lowered == "true")
        return None

    if value_type == ValueType.ENUM:
        upper = _text(raw).upper()
        return ValueEquals(field_spec.column, upper) if upper in field_spec.choices else None

    return ValueEquals(field_spec.column, _text(raw))


def parse_filters(fields: FieldMapping, raw_filters: Mapping[str, Any]) -> List[FilterCondition]:
    """Разбирает все фильтры запроса, молча отбрасывая нераспознанные"""
    conditions = []
    for name, raw in raw_filters.items():
        condition = try_parse_filter(fields.get(name), raw)
        if condition is None:
            logger.debug(f"Filter {name}={raw!r} ignored")
            continue
        conditions.append(condition)
    return conditions
