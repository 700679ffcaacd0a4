"""Tests for period-over-period variation."""
import math

import pytest

from nairim.services.dashboard import VARIATION_LIMIT, calc_variation


class TestCalcVariation:
    """Percent change is rounded and clamped."""

    def test_regular_change(self) -> None:
        metric = calc_variation(110, 100)
        assert metric.result == 110
        assert metric.variation == 10
        assert metric.is_positive is True
        assert metric.data == []

    def test_negative_change(self) -> None:
        metric = calc_variation(90, 100, [{"id": "1"}])
        assert metric.variation == -10
        assert metric.is_positive is False
        assert metric.data == [{"id": "1"}]

    @pytest.mark.parametrize("current, previous", [(1000, 1), (0, 5), (-500, 3), (1, 1000)])
    def test_clamped(self, current, previous) -> None:
        assert -VARIATION_LIMIT <= calc_variation(current, previous).variation <= VARIATION_LIMIT

    @pytest.mark.parametrize("previous", [0, math.inf, math.nan])
    def test_no_baseline(self, previous) -> None:
        metric = calc_variation(42.129, previous)
        assert metric.variation == 0
        assert metric.result == 42.13
        assert metric.is_positive is True

    def test_serializes_camel_case(self) -> None:
        assert calc_variation(1, 2).model_dump(by_alias=True).keys() == {"result", "variation", "isPositive", "data"}
