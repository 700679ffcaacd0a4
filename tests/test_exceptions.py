"""Tests for custom exception hierarchy."""
from nairim.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InvalidEntityStateError,
    NairimError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_nairim_error_is_exception(self) -> None:
        assert isinstance(NairimError("test"), Exception)

    def test_entity_not_found_message(self) -> None:
        err = EntityNotFoundError("Owner", "abc")
        assert isinstance(err, NairimError)
        assert str(err) == "Owner abc not found"
        assert err.entity == "Owner"
        assert err.entity_id == "abc"

    def test_invalid_state_is_conflict(self) -> None:
        err = InvalidEntityStateError("Lease 1 is not deleted")
        assert isinstance(err, ConflictError)
        assert isinstance(err, NairimError)

    def test_validation_error_is_nairim_error(self) -> None:
        assert isinstance(ValidationError("bad"), NairimError)
