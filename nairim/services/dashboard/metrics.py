"""
Расчет показателей дашборда по уже загруженным данным.

Функции здесь не обращаются к БД: на вход приходят снимки
записей за текущий и предыдущий периоды.
"""
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from nairim.models import PropertyStatus
from nairim.schemas.dashboard import ChartData, ClientsMetrics, FinancialMetrics, PortfolioMetrics
from nairim.services.dashboard.periods import calculate_vacancy_months
from nairim.services.dashboard.variation import calc_variation

REQUIRED_DOCUMENT_TYPES = ("TITLE_DEED", "REGISTRATION", "PROPERTY_RECORD")
MIN_DOCUMENTS = 3
OTHER_TYPE = "Outros"


def to_number(value: Any) -> float:
    return 0.0 if value is None else float(value)


@dataclass
class LeaseSnapshot:
    contract_number: str
    end_date: Optional[date]
    tenant_name: Optional[str] = None
    rent_amount: float = 0.0


@dataclass
class PropertySnapshot:
    """Объект с актуальным снимком стоимости, документами и договорами"""
    id: str
    title: str
    area_total: Optional[float] = None
    type_name: Optional[str] = None
    owner_name: Optional[str] = None
    agency_trade_name: Optional[str] = None
    status: Optional[str] = None
    rental_value: float = 0.0
    purchase_value: float = 0.0
    sale_value: float = 0.0
    condo_fee: float = 0.0
    property_tax: float = 0.0
    value_created_at: Optional[datetime] = None
    document_types: List[str] = field(default_factory=list)
    leases: List[LeaseSnapshot] = field(default_factory=list)

    @classmethod
    def from_model(cls, prop) -> "PropertySnapshot":
        value = prop.latest_value
        return cls(
            id=prop.id,
            title=prop.title,
            area_total=prop.area_total,
            type_name=prop.type.description if prop.type else None,
            owner_name=prop.owner.name if prop.owner else None,
            agency_trade_name=prop.agency.trade_name if prop.agency else None,
            status=value.status if value else None,
            rental_value=to_number(value.rental_value) if value else 0.0,
            purchase_value=to_number(value.purchase_value) if value else 0.0,
            sale_value=to_number(value.sale_value) if value else 0.0,
            condo_fee=to_number(value.condo_fee) if value else 0.0,
            property_tax=to_number(value.property_tax) if value else 0.0,
            value_created_at=value.created_at if value else None,
            document_types=[document.type for document in prop.documents],
            leases=[
                LeaseSnapshot(
                    contract_number=lease.contract_number,
                    end_date=lease.end_date,
                    tenant_name=lease.tenant.name if lease.tenant else None,
                    rent_amount=to_number(lease.rent_amount),
                )
                for lease in prop.leases
            ],
        )

    @property
    def is_available(self) -> bool:
        return self.status == PropertyStatus.AVAILABLE.value

    @property
    def is_occupied(self) -> bool:
        return self.status == PropertyStatus.OCCUPIED.value

    @property
    def last_lease(self) -> Optional[LeaseSnapshot]:
        if not self.leases:
            return None
        open_ended = [lease for lease in self.leases if lease.end_date is None]
        if open_ended:
            return open_ended[0]
        return max(self.leases, key=lambda lease: lease.end_date)

    def vacancy_months(self, reference) -> int:
        return calculate_vacancy_months([lease.end_date for lease in self.leases], reference)

    @property
    def missing_documents(self) -> List[str]:
        return [doc_type for doc_type in REQUIRED_DOCUMENT_TYPES if doc_type not in self.document_types]


@dataclass
class OwnerSnapshot:
    id: str
    name: str
    created_at: Optional[datetime]
    properties: List[PropertySnapshot] = field(default_factory=list)


@dataclass
class TenantSnapshot:
    id: str
    name: str
    created_at: Optional[datetime]
    leases: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class AgencySnapshot:
    id: str
    trade_name: Optional[str]
    legal_name: Optional[str]
    created_at: Optional[datetime]
    properties: List[PropertySnapshot] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.trade_name or self.legal_name or ""


@dataclass
class FinancialTotals:
    """Суммы финансового блока за один период"""
    average_rental: float
    active_rental: float
    unoccupied_rental: float
    acquisition: float
    tax_and_condo: float

    @property
    def vacancy_rate(self) -> float:
        return self.unoccupied_rental / self.active_rental * 100 if self.active_rental else 0.0

    @property
    def vacancy_months(self) -> float:
        return self.unoccupied_rental / self.average_rental if self.average_rental else 0.0

    @classmethod
    def of(cls, properties: List[PropertySnapshot]) -> "FinancialTotals":
        rented = [p.rental_value for p in properties if p.rental_value > 0]
        return cls(
            average_rental=sum(rented) / len(rented) if rented else 0.0,
            active_rental=sum(p.rental_value for p in properties if p.is_occupied),
            unoccupied_rental=sum(p.rental_value for p in properties if p.is_available),
            acquisition=sum(p.purchase_value for p in properties),
            tax_and_condo=sum(p.property_tax + p.condo_fee for p in properties),
        )


def _ratio(part: float, whole: float) -> float:
    return round(part / whole * 100, 2) if whole else 0.0


def financial_metrics(
    current: List[PropertySnapshot],
    previous: List[PropertySnapshot],
    current_end: datetime,
) -> FinancialMetrics:
    now = FinancialTotals.of(current)
    before = FinancialTotals.of(previous)

    average_data = [
        {
            "id": p.id,
            "title": p.title,
            "rentalValue": p.rental_value,
            "type": p.type_name,
            "areaTotal": p.area_total,
            "valuePerSqm": round(p.rental_value / p.area_total, 2) if p.area_total else 0,
            "owner": p.owner_name,
        }
        for p in current if p.rental_value > 0
    ]

    active_data = [
        {
            "id": p.id,
            "title": p.title,
            "rentalValue": p.rental_value,
            "status": p.status,
            "type": p.type_name,
            "agency": {"tradeName": p.agency_trade_name} if p.agency_trade_name else None,
            "leaseInfo": (
                {"contractNumber": p.last_lease.contract_number, "tenantName": p.last_lease.tenant_name}
                if p.last_lease else None
            ),
        }
        for p in current if p.is_occupied
    ]

    unoccupied_data = [
        {
            "id": p.id,
            "title": p.title,
            "rentalValue": p.rental_value,
            "type": p.type_name,
            "monthsVacant": p.vacancy_months(current_end),
            "estimatedLoss": p.rental_value * p.vacancy_months(current_end),
        }
        for p in current if p.is_available
    ]

    acquisition_data = [
        {
            "id": p.id,
            "title": p.title,
            "type": p.type_name,
            "purchaseValue": p.purchase_value,
            "currentStatus": p.status,
            "acquisitionDate": p.value_created_at,
            "saleValue": p.sale_value,
            "estimatedAnnualROI": _ratio(p.rental_value * 12, p.purchase_value),
        }
        for p in current if p.purchase_value > 0
    ]

    tax_data = [
        {
            "id": p.id,
            "title": p.title,
            "type": p.type_name,
            "propertyTax": p.property_tax,
            "condoFee": p.condo_fee,
            "totalTaxAndCondo": p.property_tax + p.condo_fee,
            "rentalValue": p.rental_value,
            "costToRentRatio": _ratio(p.property_tax + p.condo_fee, p.rental_value),
        }
        for p in current if p.property_tax > 0 or p.condo_fee > 0
    ]

    vacancy_months_data = [
        {
            "id": p.id,
            "title": p.title,
            "rentalValue": p.rental_value,
            "monthsOfRent": round(p.rental_value / now.average_rental, 2) if now.average_rental else 0,
        }
        for p in current if p.is_available
    ]

    return FinancialMetrics(
        average_rental_ticket=calc_variation(now.average_rental, before.average_rental, average_data),
        total_rental_active=calc_variation(now.active_rental, before.active_rental, active_data),
        total_potential_rent_unoccupied=calc_variation(
            now.unoccupied_rental, before.unoccupied_rental, unoccupied_data
        ),
        total_acquisition_value=calc_variation(now.acquisition, before.acquisition, acquisition_data),
        financial_vacancy_rate=calc_variation(now.vacancy_rate, before.vacancy_rate, unoccupied_data),
        total_property_tax_and_condo_fee=calc_variation(now.tax_and_condo, before.tax_and_condo, tax_data),
        vacancy_in_months=calc_variation(now.vacancy_months, before.vacancy_months, vacancy_months_data),
    )


def _pending_documents(properties: List[PropertySnapshot]) -> List[PropertySnapshot]:
    return [p for p in properties if len(p.document_types) < MIN_DOCUMENTS]


def _rate(matching: int, total: int) -> float:
    return matching / total * 100 if total else 0.0


def portfolio_metrics(
    current: List[PropertySnapshot],
    previous: List[PropertySnapshot],
    current_end: datetime,
    previous_end: datetime,
) -> PortfolioMetrics:
    all_data = [
        {
            "id": p.id,
            "title": p.title,
            "type": p.type_name,
            "status": p.status,
            "rentalValue": p.rental_value,
            "areaTotal": p.area_total,
            "documentCount": len(p.document_types),
            "agency": {"tradeName": p.agency_trade_name} if p.agency_trade_name else None,
        }
        for p in current
    ]

    pending = _pending_documents(current)
    pending_data = [
        {
            "id": p.id,
            "title": p.title,
            "type": p.type_name,
            "documentCount": len(p.document_types),
            "missingDocuments": p.missing_documents,
        }
        for p in pending
    ]

    sale_data = [
        {
            "id": p.id,
            "title": p.title,
            "type": p.type_name,
            "saleValue": p.sale_value,
            "rentalValue": p.rental_value,
        }
        for p in current if p.sale_value > 0
    ]

    available = [p for p in current if p.is_available]
    occupied = [p for p in current if p.is_occupied]
    available_data = [
        {
            "id": p.id,
            "title": p.title,
            "type": p.type_name or OTHER_TYPE,
            "rentalValue": p.rental_value,
            "areaTotal": p.area_total,
            "monthsVacant": p.vacancy_months(current_end),
        }
        for p in available
    ]
    occupied_data = [
        {
            "id": p.id,
            "title": p.title,
            "type": p.type_name,
            "rentalValue": p.rental_value,
            "status": p.status,
        }
        for p in occupied
    ]

    by_type: "OrderedDict[str, List[Dict[str, Any]]]" = OrderedDict()
    for item in available_data:
        by_type.setdefault(item["type"], []).append(item)
    chart = [ChartData(name=name, value=len(items), data=items) for name, items in by_type.items()]

    physical_data = [
        {"id": p.id, "title": p.title, "vacancyMonths": p.vacancy_months(current_end)}
        for p in current
    ]

    return PortfolioMetrics(
        total_properties=calc_variation(len(current), len(previous), all_data),
        count_properties_with_less_than_3_docs=calc_variation(
            len(pending), len(_pending_documents(previous)), pending_data
        ),
        total_properties_with_sale_value=calc_variation(
            len(sale_data), len([p for p in previous if p.sale_value > 0]), sale_data
        ),
        available_properties_by_type=chart,
        vacancy_rate=calc_variation(
            _rate(len(available), len(current)),
            _rate(len([p for p in previous if p.is_available]), len(previous)),
            available_data,
        ),
        occupation_rate=calc_variation(
            _rate(len(occupied), len(current)),
            _rate(len([p for p in previous if p.is_occupied]), len(previous)),
            occupied_data,
        ),
        physical_vacancy=calc_variation(
            sum(item["vacancyMonths"] for item in physical_data),
            sum(p.vacancy_months(previous_end) for p in previous),
            physical_data,
        ),
    )


def _properties_per_owner(owners: List[OwnerSnapshot]) -> float:
    if not owners:
        return 0.0
    return sum(len(owner.properties) for owner in owners) / len(owners)


def _property_brief(p: PropertySnapshot) -> Dict[str, Any]:
    return {
        "id": p.id,
        "title": p.title,
        "type": p.type_name,
        "status": p.status,
        "rentalValue": p.rental_value,
        "saleValue": p.sale_value,
    }


def clients_metrics(
    owners: List[OwnerSnapshot],
    previous_owners: List[OwnerSnapshot],
    tenants: List[TenantSnapshot],
    previous_tenants: List[TenantSnapshot],
    agencies: List[AgencySnapshot],
    previous_agencies: List[AgencySnapshot],
) -> ClientsMetrics:
    owners_data = [
        {
            "id": owner.id,
            "name": owner.name,
            "createdAt": owner.created_at,
            "propertiesCount": len(owner.properties),
            "properties": [_property_brief(p) for p in owner.properties],
        }
        for owner in owners
    ]
    tenants_data = [
        {"id": tenant.id, "name": tenant.name, "createdAt": tenant.created_at, "properties": tenant.leases}
        for tenant in tenants
    ]
    agencies_data = [
        {
            "id": agency.id,
            "legalName": agency.legal_name,
            "tradeName": agency.trade_name,
            "createdAt": agency.created_at,
            "propertiesCount": len(agency.properties),
        }
        for agency in agencies
    ]

    chart = [
        ChartData(
            name=agency.display_name,
            value=len(agency.properties),
            data=[
                {
                    **_property_brief(p),
                    "areaTotal": p.area_total,
                    "agency": {"id": agency.id, "tradeName": agency.trade_name, "legalName": agency.legal_name},
                }
                for p in agency.properties
            ],
        )
        for agency in agencies
    ]

    return ClientsMetrics(
        owners_total=calc_variation(len(owners), len(previous_owners), owners_data),
        tenants_total=calc_variation(len(tenants), len(previous_tenants), tenants_data),
        properties_per_owner=calc_variation(
            _properties_per_owner(owners), _properties_per_owner(previous_owners), owners_data
        ),
        agencies_total=calc_variation(len(agencies), len(previous_agencies), agencies_data),
        properties_by_agency=chart,
    )
