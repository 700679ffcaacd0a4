"""Tests for dashboard periods and vacancy months."""
from datetime import date, datetime, timedelta

from nairim.services.dashboard import calculate_vacancy_months, get_period_dates


class TestGetPeriodDates:
    def test_previous_window_mirrors_current(self) -> None:
        start = datetime(2024, 3, 1)
        end = datetime(2024, 3, 31, 23, 59, 59, 999000)
        periods = get_period_dates(start, end)

        assert periods.previous.end == start - timedelta(milliseconds=1)
        assert periods.previous.end - periods.previous.start == end - start
        assert periods.current.start == start


class TestCalculateVacancyMonths:
    """Whole months since the last lease ended."""

    def test_never_leased(self) -> None:
        assert calculate_vacancy_months([], date(2024, 6, 1)) == 12

    def test_open_ended_lease(self) -> None:
        assert calculate_vacancy_months([date(2020, 1, 1), None], date(2024, 6, 1)) == 0

    def test_lease_still_running(self) -> None:
        assert calculate_vacancy_months([date(2024, 12, 31)], datetime(2024, 6, 1, 10, 0)) == 0

    def test_months_since_latest_end(self) -> None:
        ends = [date(2023, 5, 31), date(2024, 1, 15)]
        assert calculate_vacancy_months(ends, date(2024, 6, 1)) == 5
