"""Tests for ccstatusline.utils.formatting."""

from ccstatusline.utils.formatting import (
    format_cost,
    format_duration_ms,
    format_percentage,
    format_tokens,
)


class TestFormatDurationMs:
    def test_under_one_minute(self):
        """Anything under a minute shows as <1m."""
        assert format_duration_ms(0) == "<1m"
        assert format_duration_ms(30000) == "<1m"
        assert format_duration_ms(59999) == "<1m"

    def test_minutes_only(self):
        assert format_duration_ms(60000) == "1m"
        assert format_duration_ms(300000) == "5m"
        assert format_duration_ms(3540000) == "59m"

    def test_whole_hours(self):
        """Zero leftover minutes are omitted."""
        assert format_duration_ms(3600000) == "1hr"
        assert format_duration_ms(7200000) == "2hr"

    def test_hours_and_minutes(self):
        assert format_duration_ms(3660000) == "1hr 1m"
        assert format_duration_ms(5400000) == "1hr 30m"
        assert format_duration_ms(9000000) == "2hr 30m"


class TestFormatTokens:
    def test_small(self):
        assert format_tokens(0) == "0"
        assert format_tokens(500) == "500"
        assert format_tokens(999) == "999"

    def test_thousands(self):
        assert format_tokens(1000) == "1.0k"
        assert format_tokens(18600) == "18.6k"
        assert format_tokens(150000) == "150.0k"

    def test_millions(self):
        assert format_tokens(1_000_000) == "1.0M"
        assert format_tokens(2_500_000) == "2.5M"

    def test_negative(self):
        """Non-positive counts show as 0."""
        assert format_tokens(-100) == "0"


class TestFormatPercentage:
    def test_one_decimal(self):
        assert format_percentage(21.0) == "21.0%"
        assert format_percentage(4.2) == "4.2%"
        assert format_percentage(100) == "100.0%"

    def test_halves_round_up(self):
        """Exact halves round up, unlike round-half-even .1f."""
        assert format_percentage(26.25) == "26.3%"
        assert format_percentage(31.25) == "31.3%"

    def test_rounds_stored_binary_value(self):
        """0.15 is stored just below the written decimal; 0.25 is exact."""
        assert format_percentage(0.15) == "0.1%"
        assert format_percentage(0.25) == "0.3%"


def test_format_cost():
    assert format_cost(2.454) == "$2.45"
    assert format_cost(0) == "$0.00"
