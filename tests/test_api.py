"""Tests for the HTTP layer."""
import pytest
from fastapi.testclient import TestClient

from nairim.database import get_db
from nairim.main import app
from nairim.routers.dashboard import get_dashboard_service
from nairim.services.dashboard import DashboardService


@pytest.fixture
def client(session_factory):
    def override_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_dashboard_service] = lambda: DashboardService(session_factory=session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client) -> None:
        assert client.get("/health").json() == {"status": "ok"}


class TestPropertiesApi:
    """List contract, errors and soft delete over HTTP."""

    def test_list_with_search_and_sort(self, client, factory) -> None:
        kind = factory.property_type()
        factory.property(factory.owner("Zeca"), kind, title="Casa do Zeca")
        factory.property(factory.owner("Ana"), kind, title="Casa da Ana")
        factory.property(factory.owner("João"), kind, title="Loja")

        response = client.get("/api/properties", params={"search": "casa", "sort_owner_name": "asc", "limit": 1})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert body["totalPages"] == 2
        assert body["currentPage"] == 1
        assert [item["owner"]["name"] for item in body["data"]] == ["Ana"]

    def test_bracket_sort_and_range_filter(self, client, factory) -> None:
        kind = factory.property_type()
        owner = factory.owner()
        factory.property(owner, kind, title="B")
        factory.property(owner, kind, title="A")

        response = client.get("/api/properties?sort[title]=desc&created_at[from]=2000-01-01")

        assert [item["title"] for item in response.json()["data"]] == ["B", "A"]

    def test_create_and_fetch(self, client, factory) -> None:
        owner = factory.owner()
        kind = factory.property_type()
        payload = {
            "title": "Novo",
            "owner_id": owner.id,
            "type_id": kind.id,
            "address": {"city": "Santos", "state": "SP"},
            "values": {"rental_value": "1800.00", "status": "OCCUPIED"},
        }

        created = client.post("/api/properties", json=payload)

        assert created.status_code == 201
        property_id = created.json()["id"]
        fetched = client.get(f"/api/properties/{property_id}").json()
        assert fetched["addresses"][0]["address"]["city"] == "Santos"
        assert fetched["values"][0]["status"] == "OCCUPIED"

    def test_missing_property_is_404(self, client) -> None:
        response = client.get("/api/properties/does-not-exist")
        assert response.status_code == 404
        assert response.json()["detail"] == "Property does-not-exist not found"

    def test_delete_and_restore(self, client, factory) -> None:
        prop = factory.property(factory.owner(), factory.property_type())

        assert client.delete(f"/api/properties/{prop.id}").status_code == 200
        assert client.get(f"/api/properties/{prop.id}").status_code == 404
        assert client.get("/api/properties").json()["count"] == 0
        assert client.get("/api/properties", params={"includeInactive": "true"}).json()["count"] == 1

        assert client.patch(f"/api/properties/{prop.id}/restore").status_code == 200
        assert client.patch(f"/api/properties/{prop.id}/restore").status_code == 409

    def test_filters_endpoint(self, client, factory) -> None:
        factory.property(factory.owner("Bia"), factory.property_type("Casa"))
        options = client.get("/api/properties/filters").json()
        assert options["owner_name"] == ["Bia"]


class TestOtherEntitiesApi:
    def test_property_type_conflict(self, client) -> None:
        assert client.post("/api/property-types", json={"description": "Casa"}).status_code == 201
        assert client.post("/api/property-types", json={"description": "casa"}).status_code == 409

    def test_lease_validation_error(self, client, factory) -> None:
        prop = factory.property(factory.owner(), factory.property_type())
        tenant = factory.tenant()
        payload = {
            "contract_number": "C-9",
            "start_date": "2024-05-01",
            "end_date": "2024-01-01",
            "rent_amount": "900",
            "rent_due_day": 5,
            "property_id": prop.id,
            "type_id": prop.type_id,
            "owner_id": prop.owner_id,
            "tenant_id": tenant.id,
        }
        assert client.post("/api/leases", json=payload).status_code == 400

    def test_owner_list_searches_contacts(self, client, factory) -> None:
        factory.owner("Ana", email="ana@imoveis.com.br")
        factory.owner("Bia", email="bia@example.com")

        body = client.get("/api/owners", params={"search": "imoveis"}).json()

        assert [item["name"] for item in body["data"]] == ["Ana"]

    def test_users_have_no_create_route(self, client) -> None:
        assert client.post("/api/users", json={"name": "x"}).status_code == 405


class TestDashboardApi:
    def test_financial(self, client, factory) -> None:
        kind = factory.property_type()
        factory.property(factory.owner(), kind, rental_value=500, status="OCCUPIED")

        response = client.get("/api/dashboard/financial", params={"startDate": "2000-01-01", "endDate": "2000-01-31"})

        assert response.status_code == 200
        assert set(response.json()) >= {"averageRentalTicket", "totalRentalActive", "financialVacancyRate"}
        assert response.json()["totalRentalActive"]["isPositive"] is True

    @pytest.mark.parametrize("params", [
        {"startDate": "01/02/2024", "endDate": "2024-02-10"},
        {"startDate": "2024-03-01", "endDate": "2024-02-01"},
        {"startDate": "2023-01-01", "endDate": "2024-06-01"},
    ])
    def test_invalid_ranges(self, client, params) -> None:
        assert client.get("/api/dashboard/portfolio", params=params).status_code == 400

    def test_missing_dates(self, client) -> None:
        assert client.get("/api/dashboard/clients").status_code == 422
