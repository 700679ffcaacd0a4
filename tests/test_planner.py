"""Tests for list query planning against the database."""
from datetime import datetime

from nairim.services.property_service import PROPERTY_QUERY
from nairim.services.property_type_service import PROPERTY_TYPE_QUERY
from nairim.services.query import MEMORY_PLAN, PUSHDOWN_PLAN, ListParams, QueryPlanner
from nairim.models.mixins import utcnow


def titles(page):
    return [record.title for record in page.data]


class TestChoosePlan:
    """Search and relation sorts run in memory, the rest in the database."""

    def test_plans(self, db) -> None:
        planner = QueryPlanner(db, PROPERTY_QUERY)
        assert planner.choose_plan(ListParams()) == PUSHDOWN_PLAN
        assert planner.choose_plan(ListParams(search="casa")) == MEMORY_PLAN
        assert planner.choose_plan(ListParams(sort_options={"owner_name": "asc"})) == MEMORY_PLAN
        assert planner.choose_plan(ListParams(sort_options={"bedrooms": "desc"})) == PUSHDOWN_PLAN


class TestPropertyListing:
    def test_relation_search_ignores_accents(self, db, factory) -> None:
        kind = factory.property_type()
        joao = factory.owner("João Silva")
        maria = factory.owner("Maria Souza")
        factory.property(joao, kind, title="Casa Verde")
        factory.property(maria, kind, title="Apto Centro")

        page = QueryPlanner(db, PROPERTY_QUERY).list(ListParams(search="joao silva"))
        assert titles(page) == ["Casa Verde"]
        assert page.count == 1
        assert page.total_pages == 1

    def test_relation_sort(self, db, factory) -> None:
        kind = factory.property_type()
        for name in ("Zeca", "Ana", "Mário"):
            factory.property(factory.owner(name), kind, title=f"Imóvel de {name}")

        page = QueryPlanner(db, PROPERTY_QUERY).list(ListParams(sort_options={"owner_name": "asc"}))
        assert [record.owner.name for record in page.data] == ["Ana", "Mário", "Zeca"]

    def test_secondary_relation_sort_in_database(self, db, factory) -> None:
        kind = factory.property_type()
        factory.property(factory.owner("Bruno"), kind, title="Casa")
        factory.property(factory.owner("Alice"), kind, title="Casa")
        factory.property(factory.owner("Carla"), kind, title="Apto")

        params = ListParams(sort_options={"title": "asc", "owner_name": "desc"})
        page = QueryPlanner(db, PROPERTY_QUERY).list(params)
        assert [(r.title, r.owner.name) for r in page.data] == [
            ("Apto", "Carla"), ("Casa", "Bruno"), ("Casa", "Alice"),
        ]

    def test_soft_deleted_rows_are_hidden(self, db, factory) -> None:
        kind = factory.property_type()
        owner = factory.owner()
        factory.property(owner, kind, title="Ativo")
        removed = factory.property(owner, kind, title="Removido")
        removed.deleted_at = utcnow()
        db.commit()

        planner = QueryPlanner(db, PROPERTY_QUERY)
        assert titles(planner.list(ListParams())) == ["Ativo"]
        assert titles(planner.list(ListParams(search="removido"))) == []
        assert sorted(titles(planner.list(ListParams(include_inactive=True)))) == ["Ativo", "Removido"]

    def test_pages_cover_everything(self, db, factory) -> None:
        kind = factory.property_type()
        owner = factory.owner()
        for i in range(5):
            factory.property(owner, kind, title=f"P{i}", created_at=datetime(2024, 1, i + 1))

        planner = QueryPlanner(db, PROPERTY_QUERY)
        seen = []
        for page_number in (1, 2, 3):
            page = planner.list(ListParams(limit=2, page=page_number))
            assert page.count == 5
            assert page.total_pages == 3
            seen.extend(titles(page))
        assert seen == ["P4", "P3", "P2", "P1", "P0"]
        assert planner.list(ListParams(limit=2, page=4)).data == []

    def test_page_beyond_offset_range_is_empty(self, db, factory) -> None:
        factory.property(factory.owner(), factory.property_type(), title="Casa")

        page = QueryPlanner(db, PROPERTY_QUERY).list(ListParams.from_query([("page", str(10 ** 19))]))
        assert page.data == []
        assert page.count == 1
        assert page.total_pages == 1
        assert page.current_page == 10 ** 19

    def test_database_filters(self, db, factory) -> None:
        kind = factory.property_type()
        owner = factory.owner("Helena")
        factory.property(owner, kind, title="Santos 3q", bedrooms=3, address={"city": "Santos"},
                         created_at=datetime(2024, 2, 10, 15, 0))
        factory.property(owner, kind, title="Santos 2q", bedrooms=2, address={"city": "Santos"},
                         created_at=datetime(2024, 2, 11, 9, 0))
        factory.property(owner, kind, title="Campinas 3q", bedrooms=3, address={"city": "Campinas"},
                         created_at=datetime(2024, 2, 10, 8, 0))

        planner = QueryPlanner(db, PROPERTY_QUERY)
        page = planner.list(ListParams(filters={"city": "santos", "bedrooms": "3"}))
        assert titles(page) == ["Santos 3q"]

        page = planner.list(ListParams(filters={"created_at": "2024-02-10"}))
        assert sorted(titles(page)) == ["Campinas 3q", "Santos 3q"]

        page = planner.list(ListParams(filters={"owner_name": "hel", "bedrooms": "not a number"}))
        assert page.count == 3

    def test_filter_options(self, db, factory) -> None:
        kind = factory.property_type("Casa")
        factory.property(factory.owner("Bia"), kind, address={"city": "Santos"})
        factory.property(factory.owner("Ana"), kind, address={"city": "Campinas"})

        options = QueryPlanner(db, PROPERTY_QUERY).filter_options()
        assert options["owner_name"] == ["Ana", "Bia"]
        assert options["city"] == ["Campinas", "Santos"]
        assert options["type_description"] == ["Casa"]
        assert options["created_at"]["min"] is not None


class TestDefaultOrder:
    def test_property_types_sorted_by_description(self, db, factory) -> None:
        for description in ("Sala", "Apartamento", "Loja"):
            factory.property_type(description)

        page = QueryPlanner(db, PROPERTY_TYPE_QUERY).list(ListParams())
        assert [t.description for t in page.data] == ["Apartamento", "Loja", "Sala"]
