"""
Дашборд: финансовые показатели, портфель, клиенты и карта объектов
"""
from nairim.services.dashboard.variation import VARIATION_LIMIT, calc_variation
from nairim.services.dashboard.periods import Period, PeriodComparison, get_period_dates, calculate_vacancy_months
from nairim.services.dashboard.geocoding import AddressPoint, GeocodingBatcher
from nairim.services.dashboard.service import DashboardService

__all__ = [
    "VARIATION_LIMIT", "calc_variation",
    "Period", "PeriodComparison", "get_period_dates", "calculate_vacancy_months",
    "AddressPoint", "GeocodingBatcher",
    "DashboardService",
]
