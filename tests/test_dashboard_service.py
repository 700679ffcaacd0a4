"""Tests for the dashboard service against the database."""
import asyncio
from datetime import datetime

import httpx

from nairim.services.dashboard import DashboardService, GeocodingBatcher

START = datetime(2024, 6, 1)
END = datetime(2024, 6, 30, 23, 59, 59, 999000)
IN_JUNE = datetime(2024, 6, 10, 12, 0)
IN_MAY = datetime(2024, 5, 20, 12, 0)


def seed(factory):
    kind = factory.property_type("Casa")
    owner = factory.owner("Ana", created_at=IN_JUNE)
    factory.owner("Caio", created_at=IN_MAY)
    factory.property(owner, kind, title="Vaga", rental_value=1000, status="AVAILABLE", created_at=IN_JUNE,
                     address={"street": "Rua A", "number": "1", "city": "Santos", "state": "SP"})
    factory.property(owner, kind, title="Alugada", rental_value=2000, status="OCCUPIED", created_at=IN_JUNE,
                     address={"street": "Rua B", "number": "2", "city": "Santos", "state": "SP"})
    factory.property(owner, kind, title="Antiga", rental_value=1000, status="OCCUPIED", created_at=IN_MAY)
    factory.agency("Prime", created_at=IN_JUNE)


class TestDashboardService:
    """Current and previous windows are loaded separately."""

    def test_financial(self, factory, session_factory) -> None:
        seed(factory)
        service = DashboardService(session_factory=session_factory)

        metrics = asyncio.run(service.get_financial_metrics(START, END))

        assert metrics.total_rental_active.result == 2000
        assert metrics.total_rental_active.variation == 60
        assert metrics.total_potential_rent_unoccupied.result == 1000
        assert metrics.financial_vacancy_rate.result == 50

    def test_portfolio(self, factory, session_factory) -> None:
        seed(factory)
        metrics = asyncio.run(DashboardService(session_factory=session_factory).get_portfolio_metrics(START, END))

        assert metrics.total_properties.result == 2
        assert metrics.total_properties.variation == 60
        assert metrics.occupation_rate.result == 50
        assert [item.name for item in metrics.available_properties_by_type] == ["Casa"]

    def test_clients(self, factory, session_factory) -> None:
        seed(factory)
        metrics = asyncio.run(DashboardService(session_factory=session_factory).get_clients_metrics(START, END))

        assert metrics.owners_total.result == 1
        assert metrics.owners_total.variation == 0
        assert metrics.properties_per_owner.result == 3
        assert metrics.agencies_total.result == 1
        assert metrics.properties_by_agency[0].name == "Prime"

    def test_geolocation_and_all(self, factory, session_factory) -> None:
        seed(factory)
        queries = []

        def handler(request: httpx.Request) -> httpx.Response:
            queries.append(request.url.params["q"])
            return httpx.Response(200, json=[{"lat": "-23.9", "lon": "-46.3"}])

        async def scenario():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                service = DashboardService(session_factory=session_factory, geocoder=GeocodingBatcher(client=client))
                return await service.get_all(START, END)

        dashboard = asyncio.run(scenario())

        assert sorted(point.info for point in dashboard.map.coordinates) == ["Alugada (Santos/SP)", "Vaga (Santos/SP)"]
        assert sorted(queries) == ["Rua A, 1, Santos, SP, Brasil", "Rua B, 2, Santos, SP, Brasil"]
        assert dashboard.financial.total_rental_active.result == 2000

    def test_geolocation_without_addresses(self, session_factory) -> None:
        result = asyncio.run(DashboardService(session_factory=session_factory).get_geolocation(START, END))
        assert result.coordinates == []
