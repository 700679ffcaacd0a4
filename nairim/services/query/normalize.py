import unicodedata
from typing import Any, Optional

_FOLD = str.maketrans({"ç": "c", "Ç": "c", "ñ": "n", "Ñ": "n"})


def normalize(text: Optional[Any]) -> str:
    """
    Приводит строку к виду для поиска и сравнения:
    без диакритики, в нижнем регистре, без пробелов по краям.

    Args:
        text: Исходное значение (None и пустая строка дают "")

    Returns:
        Нормализованная строка
    """
    if text is None:
        return ""
    value = str(text)
    if not value:
        return ""

    decomposed = unicodedata.normalize("NFD", value.translate(_FOLD))
    stripped = "".join(ch for ch in decomposed if not "\u0300" <= ch <= "\u036f")
    return stripped.lower().strip()
