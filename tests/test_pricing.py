"""Tests for booking cost calculation."""

from decimal import Decimal

import pytest

from parkpulse.booking.pricing import calculate_cost, format_cost
from parkpulse.booking.time_window import TimeSpan


class TestCalculateCost:
    def test_full_day_window(self):
        assert calculate_cost(Decimal("5.00"), TimeSpan(540, 1020)) == Decimal("40.00")

    def test_half_hour(self):
        assert calculate_cost(Decimal("7.50"), TimeSpan(540, 570)) == Decimal("3.75")

    def test_half_cent_rounds_up(self):
        # 0.01/hr for 30 minutes is exactly 0.005
        assert calculate_cost(Decimal("0.01"), TimeSpan(0, 30)) == Decimal("0.01")

    def test_float_rate_uses_decimal_value(self):
        assert calculate_cost(7.5, TimeSpan(540, 570)) == Decimal("3.75")
        assert calculate_cost("2.10", TimeSpan(0, 10)) == Decimal("0.35")

    def test_one_minute(self):
        assert calculate_cost(Decimal("6.00"), TimeSpan(600, 601)) == Decimal("0.10")

    def test_inverted_span_costs_zero(self):
        assert calculate_cost(Decimal("5.00"), TimeSpan(1020, 540)) == Decimal("0.00")

    def test_zero_length_span_costs_zero(self):
        assert calculate_cost(Decimal("5.00"), TimeSpan(600, 600)) == Decimal("0.00")

    @pytest.mark.parametrize("rate", [0, -5, "abc", "", "NaN", "Infinity", None])
    def test_bad_rate_costs_zero(self, rate):
        assert calculate_cost(rate, TimeSpan(540, 600)) == Decimal("0.00")

    def test_never_negative(self):
        for start, end in [(0, 1439), (1439, 0), (700, 699)]:
            assert calculate_cost(Decimal("3.33"), TimeSpan(start, end)) >= 0

    def test_monotonic_in_duration(self):
        rate = Decimal("3.33")
        costs = [calculate_cost(rate, TimeSpan(540, 540 + m)) for m in range(1, 240)]
        assert costs == sorted(costs)

    def test_result_has_two_decimal_places(self):
        cost = calculate_cost(Decimal("4.99"), TimeSpan(540, 553))
        assert cost.as_tuple().exponent == -2


class TestFormatCost:
    def test_formats_with_currency_symbol(self):
        assert format_cost(Decimal("40")) == "$40.00"
        assert format_cost(Decimal("3.75")) == "$3.75"
