"""Tests for in-memory search, sort and paging."""
from datetime import datetime
from types import SimpleNamespace

from nairim.services.property_service import PROPERTY_QUERY
from nairim.services.query import InMemorySearchAndSort


def make_property(title, owner_name, created_day, area_total=None, city=None):
    addresses = [SimpleNamespace(address=SimpleNamespace(city=city, state="SP"))] if city else []
    return SimpleNamespace(
        title=title,
        tax_registration=None,
        notes=None,
        owner=SimpleNamespace(name=owner_name),
        type=SimpleNamespace(description="Casa"),
        agency=None,
        area_total=area_total,
        addresses=addresses,
        created_at=datetime(2024, 1, created_day),
    )


def engine() -> InMemorySearchAndSort:
    return InMemorySearchAndSort(PROPERTY_QUERY.fields, PROPERTY_QUERY.search)


class TestSearch:
    """Accent and case insensitive matching across related values."""

    def test_matches_relation_value_without_accents(self) -> None:
        records = [make_property("Casa Azul", "João Silva", 1), make_property("Loft", "Maria", 2)]
        found = engine().search(records, "joao silva")
        assert [r.title for r in found] == ["Casa Azul"]

    def test_matches_address(self) -> None:
        records = [make_property("A", "X", 1, city="Ribeirão Preto"), make_property("B", "Y", 2)]
        assert [r.title for r in engine().search(records, "RIBEIRAO")] == ["A"]

    def test_empty_term_keeps_everything(self) -> None:
        records = [make_property("A", "X", 1)]
        assert engine().search(records, "  ") == records

    def test_more_specific_term_never_finds_more(self) -> None:
        records = [make_property(t, "Owner", i + 1) for i, t in enumerate(["Casa", "Casarão", "Loja"])]
        broad = engine().search(records, "casa")
        narrow = engine().search(records, "casar")
        assert set(map(id, narrow)) <= set(map(id, broad))


class TestSort:
    def test_relation_sort_is_accent_insensitive(self) -> None:
        records = [
            make_property("z", "Zeca", 1),
            make_property("a", "Ana", 2),
            make_property("m", "Mário", 3),
        ]
        ordered = engine().sort(records, "owner_name", "asc")
        assert [r.owner.name for r in ordered] == ["Ana", "Mário", "Zeca"]

    def test_numeric_sort_is_native(self) -> None:
        records = [
            make_property("a", "X", 1, area_total=100.0),
            make_property("b", "X", 2, area_total=9.5),
            make_property("c", "X", 3, area_total=None),
        ]
        ordered = engine().sort(records, "area_total", "desc")
        assert [r.title for r in ordered] == ["a", "b", "c"]

    def test_default_is_newest_first(self) -> None:
        records = [make_property("old", "X", 1), make_property("new", "X", 5)]
        assert [r.title for r in engine().sort(records, None)] == ["new", "old"]

    def test_ties_keep_newest_first(self) -> None:
        records = [make_property("old", "Ana", 1), make_property("new", "Ana", 5)]
        assert [r.title for r in engine().sort(records, "owner_name")] == ["new", "old"]


class TestApply:
    def test_pages_cover_all_records_once(self) -> None:
        records = [make_property(f"P{i}", "Owner", i + 1) for i in range(7)]
        seen = []
        for skip in range(0, 9, 3):
            page, total = engine().apply(records, skip=skip, take=3)
            assert total == 7
            seen.extend(page)
        assert sorted(r.title for r in seen) == sorted(r.title for r in records)

    def test_out_of_range_page_is_empty(self) -> None:
        page, total = engine().apply([make_property("A", "X", 1)], skip=10, take=10)
        assert page == []
        assert total == 1
