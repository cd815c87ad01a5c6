"""Interfaces the jobs and services expect from market data sources."""
from typing import Protocol

from thai_stock.modules.market_data.schemas import HistoryPoint


class PriceSource(Protocol):
    """Live quote lookup. Returns None whenever the price is unavailable."""

    async def fetch_price(self, symbol: str) -> float | None:
        ...


class HistorySource(Protocol):
    """Daily closes for a symbol, oldest first. Empty on failure."""

    async def fetch_history(self, symbol: str) -> list[HistoryPoint]:
        ...
