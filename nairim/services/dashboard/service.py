"""
Сервис дашборда: загрузка данных за текущий и предыдущий периоды
и сборка показателей.

Оба периода загружаются параллельно, каждый в своей сессии БД.
"""
import asyncio
import logging
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from nairim.database import SessionLocal
from nairim.models import Agency, Lease, Owner, Property, PropertyAddress, Tenant
from nairim.schemas.dashboard import (
    ClientsMetrics, DashboardResponse, FinancialMetrics, GeolocationResponse, PortfolioMetrics,
)
from nairim.services.dashboard.geocoding import AddressPoint, GeocodingBatcher
from nairim.services.dashboard.metrics import (
    AgencySnapshot, OwnerSnapshot, PropertySnapshot, TenantSnapshot,
    clients_metrics, financial_metrics, portfolio_metrics,
)
from nairim.services.dashboard.periods import Period, get_period_dates

logger = logging.getLogger(__name__)

PROPERTY_OPTIONS = (
    selectinload(Property.type),
    selectinload(Property.owner),
    selectinload(Property.agency),
    selectinload(Property.values),
    selectinload(Property.documents),
    selectinload(Property.leases).selectinload(Lease.tenant),
)


def _created_within(model, period: Period):
    return (
        select(model)
        .where(
            model.deleted_at.is_(None),
            model.created_at >= period.start,
            model.created_at <= period.end,
        )
        .order_by(model.created_at.desc())
    )


def load_properties(db: Session, period: Period) -> List[PropertySnapshot]:
    records = db.scalars(_created_within(Property, period).options(*PROPERTY_OPTIONS)).all()
    return [PropertySnapshot.from_model(record) for record in records]


def load_owners(db: Session, period: Period) -> List[OwnerSnapshot]:
    statement = _created_within(Owner, period).options(
        selectinload(Owner.properties).options(*PROPERTY_OPTIONS)
    )
    return [
        OwnerSnapshot(
            id=owner.id,
            name=owner.name,
            created_at=owner.created_at,
            properties=[PropertySnapshot.from_model(p) for p in owner.properties],
        )
        for owner in db.scalars(statement).all()
    ]


def load_tenants(db: Session, period: Period) -> List[TenantSnapshot]:
    statement = _created_within(Tenant, period).options(
        selectinload(Tenant.leases).selectinload(Lease.property)
    )
    return [
        TenantSnapshot(
            id=tenant.id,
            name=tenant.name,
            created_at=tenant.created_at,
            leases=[
                {
                    "propertyId": lease.property_id,
                    "title": lease.property.title if lease.property else None,
                    "contractNumber": lease.contract_number,
                }
                for lease in tenant.leases
            ],
        )
        for tenant in db.scalars(statement).all()
    ]


def load_agencies(db: Session, period: Period) -> List[AgencySnapshot]:
    statement = _created_within(Agency, period).options(
        selectinload(Agency.properties).options(*PROPERTY_OPTIONS)
    )
    return [
        AgencySnapshot(
            id=agency.id,
            trade_name=agency.trade_name,
            legal_name=agency.legal_name,
            created_at=agency.created_at,
            properties=[PropertySnapshot.from_model(p) for p in agency.properties],
        )
        for agency in db.scalars(statement).all()
    ]


def load_clients(db: Session, period: Period) -> Tuple[list, list, list]:
    return load_owners(db, period), load_tenants(db, period), load_agencies(db, period)


def load_address_points(db: Session, period: Period) -> List[AddressPoint]:
    statement = _created_within(Property, period).options(
        selectinload(Property.addresses).selectinload(PropertyAddress.address)
    )
    points = []
    for prop in db.scalars(statement).all():
        for link in prop.addresses:
            address = link.address
            points.append(AddressPoint(
                title=prop.title,
                street=address.street,
                number=address.number,
                city=address.city,
                state=address.state,
                country=address.country,
            ))
    return points


class DashboardService:
    """
    Показатели дашборда за период с изменением к предыдущему периоду той же длины.

    session_factory создает отдельную сессию на каждую загрузку,
    поэтому загрузки периодов можно выполнять в разных потоках.
    """

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal, geocoder: Optional[GeocodingBatcher] = None):
        self.session_factory = session_factory
        self.geocoder = geocoder

    def _run(self, loader, period: Period):
        db = self.session_factory()
        try:
            return loader(db, period)
        finally:
            db.close()

    async def _fetch_windows(self, loader, start_date: datetime, end_date: datetime):
        periods = get_period_dates(start_date, end_date)
        logger.debug(
            f"Dashboard {loader.__name__}: current {periods.current.start} - {periods.current.end}, "
            f"previous {periods.previous.start} - {periods.previous.end}"
        )
        current, previous = await asyncio.gather(
            asyncio.to_thread(self._run, loader, periods.current),
            asyncio.to_thread(self._run, loader, periods.previous),
        )
        return periods, current, previous

    async def get_financial_metrics(self, start_date: datetime, end_date: datetime) -> FinancialMetrics:
        periods, current, previous = await self._fetch_windows(load_properties, start_date, end_date)
        return financial_metrics(current, previous, periods.current.end)

    async def get_portfolio_metrics(self, start_date: datetime, end_date: datetime) -> PortfolioMetrics:
        periods, current, previous = await self._fetch_windows(load_properties, start_date, end_date)
        return portfolio_metrics(current, previous, periods.current.end, periods.previous.end)

    async def get_clients_metrics(self, start_date: datetime, end_date: datetime) -> ClientsMetrics:
        _, current, previous = await self._fetch_windows(load_clients, start_date, end_date)
        owners, tenants, agencies = current
        previous_owners, previous_tenants, previous_agencies = previous
        return clients_metrics(owners, previous_owners, tenants, previous_tenants, agencies, previous_agencies)

    async def get_geolocation(self, start_date: datetime, end_date: datetime) -> GeolocationResponse:
        points = await asyncio.to_thread(self._run, load_address_points, Period(start_date, end_date))
        if not points:
            return GeolocationResponse(coordinates=[])

        if self.geocoder is not None:
            coordinates = await self.geocoder.resolve_all(points)
        else:
            async with GeocodingBatcher() as geocoder:
                coordinates = await geocoder.resolve_all(points)
        return GeolocationResponse(coordinates=coordinates)

    async def get_all(self, start_date: datetime, end_date: datetime) -> DashboardResponse:
        financial, portfolio, clients, geolocation = await asyncio.gather(
            self.get_financial_metrics(start_date, end_date),
            self.get_portfolio_metrics(start_date, end_date),
            self.get_clients_metrics(start_date, end_date),
            self.get_geolocation(start_date, end_date),
        )
        return DashboardResponse(financial=financial, portfolio=portfolio, clients=clients, map=geolocation)
