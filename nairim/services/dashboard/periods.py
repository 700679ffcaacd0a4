from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Sequence, Union


@dataclass(frozen=True)
class Period:
    start: datetime
    end: datetime


@dataclass(frozen=True)
class PeriodComparison:
    current: Period
    previous: Period


def get_period_dates(start_date: datetime, end_date: datetime) -> PeriodComparison:
    """
    Предыдущий период той же длины, заканчивающийся
    за 1 мс до начала текущего
    """
    duration = end_date - start_date
    previous_end = start_date - timedelta(milliseconds=1)
    return PeriodComparison(
        current=Period(start_date, end_date),
        previous=Period(previous_end - duration, previous_end),
    )


def calculate_vacancy_months(lease_end_dates: Sequence[Optional[date]], reference: Union[date, datetime]) -> int:
    """
    Сколько полных месяцев объект пустует на дату reference.

    Объект без договоров считается пустующим 12 месяцев.
    Договор без даты окончания или заканчивающийся не раньше
    reference означает, что объект занят.
    """
    if not lease_end_dates:
        return 12
    if any(end is None for end in lease_end_dates):
        return 0

    reference_day = reference.date() if isinstance(reference, datetime) else reference
    last_end = max(end.date() if isinstance(end, datetime) else end for end in lease_end_dates)
    if last_end >= reference_day:
        return 0

    months = (reference_day.year - last_end.year) * 12 + (reference_day.month - last_end.month)
    return max(0, months)
