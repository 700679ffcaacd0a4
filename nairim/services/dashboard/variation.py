import math
from typing import Any, Optional, Sequence

from nairim.schemas.dashboard import MetricResult

# Ограничение изменения в процентах, чтобы малые базы не давали скачков
VARIATION_LIMIT = 60.0


def calc_variation(current: float, previous: float, data: Optional[Sequence[Any]] = None) -> MetricResult:
    """
    Оборачивает значение показателя изменением к прошлому периоду.

    Args:
        current: Значение за текущий период
        previous: Значение за предыдущий период
        data: Записи для детализации в интерфейсе

    Returns:
        MetricResult с округлением до 2 знаков и изменением в [-60, 60]
    """
    current = float(current)
    previous = float(previous)
    items = list(data) if data else []

    if previous == 0 or not math.isfinite(previous):
        return MetricResult(result=round(current, 2), variation=0.0, is_positive=current >= 0, data=items)

    variation = (current - previous) / previous * 100
    variation = max(min(variation, VARIATION_LIMIT), -VARIATION_LIMIT)
    return MetricResult(
        result=round(current, 2),
        variation=round(variation, 2),
        is_positive=variation >= 0,
        data=items,
    )
