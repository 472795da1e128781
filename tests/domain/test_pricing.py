"""Unit tests for the pricing engine."""

import pytest

from fundraiser.domain.model.value_objects import PriceList
from fundraiser.domain.service.pricing import compute_total


class TestComputeTotal:

    @pytest.mark.parametrize(
        "players, wants_business, business",
        [(0, False, 0), (1, False, 0), (2, False, 5), (2, True, 1), (20, True, 10), (0, True, 3)],
    )
    def test_default_prices(self, players, wants_business, business):
        expected = players * 20 + (business * 200 if wants_business else 0)
        assert compute_total(players, wants_business, business) == expected

    def test_business_lines_ignored_without_design(self):
        assert compute_total(2, False, 4) == 40

    def test_player_and_business_lines(self):
        assert compute_total(2, True, 1) == 240

    def test_custom_price_list(self):
        prices = PriceList(per_player_line=15, per_business_line=150)
        assert compute_total(3, True, 2, prices) == 3 * 15 + 2 * 150

    def test_zero_lines_cost_nothing(self):
        assert compute_total(0, True, 0) == 0
