from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MetricResult(CamelModel):
    """Значение показателя, изменение к прошлому периоду и данные для детализации"""
    result: float
    variation: float
    is_positive: bool
    data: List[Any] = []


class ChartData(CamelModel):
    """Элемент серии графика"""
    name: str
    value: float
    data: List[Any] = []


class GeolocationPoint(CamelModel):
    lat: float
    lng: float
    info: str


class FinancialMetrics(CamelModel):
    average_rental_ticket: MetricResult
    total_rental_active: MetricResult
    total_potential_rent_unoccupied: MetricResult
    total_acquisition_value: MetricResult
    financial_vacancy_rate: MetricResult
    total_property_tax_and_condo_fee: MetricResult
    vacancy_in_months: MetricResult


class PortfolioMetrics(CamelModel):
    total_properties: MetricResult
    count_properties_with_less_than_3_docs: MetricResult = Field(alias="countPropertiesWithLessThan3Docs")
    total_properties_with_sale_value: MetricResult
    available_properties_by_type: List[ChartData]
    vacancy_rate: MetricResult
    occupation_rate: MetricResult
    physical_vacancy: MetricResult


class ClientsMetrics(CamelModel):
    owners_total: MetricResult
    tenants_total: MetricResult
    properties_per_owner: MetricResult
    agencies_total: MetricResult
    properties_by_agency: List[ChartData]


class GeolocationResponse(CamelModel):
    coordinates: List[GeolocationPoint]


class DashboardResponse(CamelModel):
    financial: FinancialMetrics
    portfolio: PortfolioMetrics
    clients: ClientsMetrics
    map: GeolocationResponse
