from collections.abc import Mapping, Sequence
from typing import Any


def safe_get(record: Any, path: str) -> Any:
    """
    Читает значение по пути через точку, например "owner.name"
    или "addresses.0.address.city".

    Числовой сегмент - индекс в списке. Если любое промежуточное
    значение отсутствует, возвращается None без исключений.
    """
    current = record
    for part in path.split("."):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(part)
        elif part.isdigit() and isinstance(current, Sequence) and not isinstance(current, str):
            index = int(part)
            current = current[index] if index < len(current) else None
        else:
            current = getattr(current, part, None)
    return current
