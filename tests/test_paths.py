"""Tests for dotted path resolution."""
from types import SimpleNamespace

from nairim.services.query import safe_get


class TestSafeGet:
    """Reading nested values from dicts, lists and objects."""

    def test_object_attributes(self) -> None:
        record = SimpleNamespace(owner=SimpleNamespace(name="Ana"))
        assert safe_get(record, "owner.name") == "Ana"

    def test_list_index(self) -> None:
        record = {"addresses": [{"address": {"city": "Campinas"}}]}
        assert safe_get(record, "addresses.0.address.city") == "Campinas"

    def test_missing_intermediate_returns_none(self) -> None:
        record = SimpleNamespace(owner=None)
        assert safe_get(record, "owner.name") is None
        assert safe_get({"addresses": []}, "addresses.0.address.city") is None
        assert safe_get({}, "type.description") is None

    def test_unknown_attribute_returns_none(self) -> None:
        assert safe_get(SimpleNamespace(title="x"), "nope") is None
