import logging
from typing import Any, List, Optional, Sequence, Tuple

from nairim.services.query.fields import (
    ADDRESS_SEARCH_FIELDS,
    CONTACT_SEARCH_FIELDS,
    NATIVE_ORDER_TYPES,
    FieldMapping,
    FieldSpec,
    SearchProfile,
)
from nairim.services.query.normalize import normalize
from nairim.services.query.paths import safe_get

logger = logging.getLogger(__name__)


def _present(value: Any) -> bool:
    return value is not None and value != ""


class InMemorySearchAndSort:
    """
    Поиск, сортировка и пагинация уже загруженной коллекции.
    Используется, когда условие нельзя выразить запросом к БД.
    """

    def __init__(self, fields: FieldMapping, profile: SearchProfile):
        self.fields = fields
        self.profile = profile

    def haystack(self, record: Any) -> str:
        """Склеивает все искомые значения записи в одну нормализованную строку"""
        parts = []
        for path in self.profile.direct + self.profile.relations:
            value = safe_get(record, path)
            if _present(value):
                parts.append(str(value))

        if self.profile.addresses:
            for link in safe_get(record, self.profile.addresses) or []:
                for name in ADDRESS_SEARCH_FIELDS:
                    value = safe_get(link, f"address.{name}")
                    if _present(value):
                        parts.append(str(value))

        if self.profile.contacts:
            for link in safe_get(record, self.profile.contacts) or []:
                for name in CONTACT_SEARCH_FIELDS:
                    value = safe_get(link, f"contact.{name}")
                    if _present(value):
                        parts.append(str(value))

        return normalize(" ".join(parts))

    def search(self, records: Sequence[Any], term: Optional[str]) -> List[Any]:
        needle = normalize(term)
        if not needle:
            return list(records)
        return [record for record in records if needle in self.haystack(record)]

    @staticmethod
    def _sort_key(field_spec: FieldSpec):
        path = field_spec.read_path
        if field_spec.is_direct and field_spec.value_type in NATIVE_ORDER_TYPES:
            def native(record):
                value = safe_get(record, path)
                return (0,) if value is None else (1, value)
            return native

        def collated(record):
            return normalize(safe_get(record, path))
        return collated

    def sort(self, records: Sequence[Any], field: Optional[str], direction: str = "asc") -> List[Any]:
        """
        Сортирует по created_at (новые первыми), затем по запрошенному полю.
        Сортировка устойчивая, поэтому при равенстве поля новые остаются выше.
        """
        ordered = sorted(records, key=self._sort_key(self.fields["created_at"]), reverse=True)

        field_spec = self.fields.get(field) if field else None
        if field_spec is None or not field_spec.sortable:
            return ordered
        return sorted(ordered, key=self._sort_key(field_spec), reverse=direction == "desc")

    def apply(
        self,
        records: Sequence[Any],
        search: Optional[str] = None,
        sort_field: Optional[str] = None,
        sort_direction: str = "asc",
        skip: int = 0,
        take: int = 10,
    ) -> Tuple[List[Any], int]:
        """
        Returns:
            (страница записей, общее число найденных записей)
        """
        found = self.search(records, search)
        ordered = self.sort(found, sort_field, sort_direction)
        logger.debug(f"In-memory search matched {len(found)} of {len(records)} records")
        return ordered[skip:skip + take], len(found)
