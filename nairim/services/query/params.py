import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from nairim.config import get_settings

settings = get_settings()

_SORT_UNDERSCORE = re.compile(r"^sort_(?P<field>.+)$")
_SORT_BRACKETS = re.compile(r"^sort\[(?P<field>[^\]]+)\]$")
_RANGE_BOUND = re.compile(r"^(?P<field>[^\[]+)\[(?P<bound>from|to)\]$")


def _to_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def sort_direction(value: Any) -> str:
    return "desc" if str(value).strip().lower() == "desc" else "asc"


@dataclass
class ListParams:
    """Параметры запроса списка после нормализации"""
    limit: int = settings.default_page_size
    page: int = 1
    search: Optional[str] = None
    filters: Dict[str, Any] = field(default_factory=dict)
    sort_options: Dict[str, str] = field(default_factory=dict)
    include_inactive: bool = False

    @property
    def take(self) -> int:
        return min(max(self.limit, 1), settings.max_page_size)

    @property
    def current_page(self) -> int:
        return max(self.page, 1)

    @property
    def skip(self) -> int:
        return (self.current_page - 1) * self.take

    @property
    def search_term(self) -> str:
        return (self.search or "").strip()

    @property
    def sort_field(self) -> Optional[str]:
        """Первое объявленное поле сортировки"""
        return next(iter(self.sort_options), None)

    @classmethod
    def from_query(cls, items: Iterable[Tuple[str, str]]) -> "ListParams":
        """
        Собирает параметры из пар query string.

        Сортировка принимается как sort_<field>=asc|desc и sort[<field>]=asc|desc,
        диапазон дат как <field>[from]=...&<field>[to]=...,
        остальные пары считаются фильтрами.
        """
        params = cls()
        for key, value in items:
            sort_match = _SORT_BRACKETS.match(key) or _SORT_UNDERSCORE.match(key)
            range_match = _RANGE_BOUND.match(key)
            if key == "limit":
                params.limit = _to_int(value, settings.default_page_size)
            elif key == "page":
                params.page = _to_int(value, 1)
            elif key == "search":
                params.search = value
            elif key in ("includeInactive", "include_inactive"):
                params.include_inactive = str(value).strip().lower() == "true"
            elif sort_match:
                params.sort_options[sort_match.group("field")] = sort_direction(value)
            elif range_match:
                bounds = params.filters.setdefault(range_match.group("field"), {})
                if isinstance(bounds, dict):
                    bounds[range_match.group("bound")] = value
            elif value not in (None, ""):
                params.filters[key] = value
        return params


@dataclass
class Page:
    """Страница результата списка"""
    data: List[Any]
    count: int
    total_pages: int
    current_page: int

    @classmethod
    def build(cls, data: List[Any], count: int, params: ListParams) -> "Page":
        total_pages = math.ceil(count / params.take) if count else 0
        return cls(data=data, count=count, total_pages=total_pages, current_page=params.current_page)
