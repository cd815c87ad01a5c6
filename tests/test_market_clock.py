from datetime import datetime

import pytest
import pytz

from thai_stock.core.market_clock import BANGKOK, is_market_open, local_day_bounds, to_utc_naive


def bangkok(year, month, day, hour, minute):
    return BANGKOK.localize(datetime(year, month, day, hour, minute))


class TestIsMarketOpen:
    """2026-10-20 is a Tuesday, 2026-10-17/18 a weekend."""

    @pytest.mark.parametrize("hour,minute,expected", [
        (9, 59, False),
        (10, 0, True),
        (10, 15, True),
        (12, 30, True),
        (12, 31, False),
        (13, 0, False),
        (14, 0, True),
        (16, 30, True),
        (16, 31, False),
        (20, 0, False),
    ])
    def test_weekday_sessions(self, hour, minute, expected):
        assert is_market_open(bangkok(2026, 10, 20, hour, minute)) is expected

    @pytest.mark.parametrize("day", [17, 18])
    @pytest.mark.parametrize("hour,minute", [(10, 15), (14, 30), (0, 0)])
    def test_closed_on_weekends(self, day, hour, minute):
        assert is_market_open(bangkok(2026, 10, day, hour, minute)) is False

    def test_naive_datetime_is_utc(self):
        # 03:15 UTC == 10:15 in Bangkok
        assert is_market_open(datetime(2026, 10, 20, 3, 15)) is True
        # 10:15 UTC == 17:15 in Bangkok
        assert is_market_open(datetime(2026, 10, 20, 10, 15)) is False

    def test_other_timezones_are_converted(self):
        london = pytz.timezone("Europe/London")
        # 04:15 BST == 10:15 in Bangkok
        assert is_market_open(london.localize(datetime(2026, 10, 20, 4, 15))) is True

    def test_weekend_boundary_uses_bangkok_date(self):
        # Friday 20:00 UTC is already Saturday 03:00 in Bangkok
        assert is_market_open(datetime(2026, 10, 16, 20, 0)) is False


def test_local_day_bounds_cover_bangkok_midnight_to_midnight():
    start, end = local_day_bounds(bangkok(2026, 10, 20, 9, 0))

    assert start == datetime(2026, 10, 19, 17, 0)
    assert end == datetime(2026, 10, 20, 17, 0)


def test_to_utc_naive():
    assert to_utc_naive(bangkok(2026, 10, 20, 10, 0)) == datetime(2026, 10, 20, 3, 0)
    assert to_utc_naive(datetime(2026, 10, 20, 3, 0)) == datetime(2026, 10, 20, 3, 0)
