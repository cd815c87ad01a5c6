import logging
from datetime import datetime

import httpx
import pytz

from thai_stock.core.config import settings
from thai_stock.modules.market_data.schemas import HistoryPoint


logger = logging.getLogger(__name__)


def parse_chart(payload: dict) -> list[HistoryPoint]:
    """Turn a v8 chart response into (date, close) points, oldest first.

    Days without a close (trading halts, the still-open session) are dropped.
    """
    results = (payload.get("chart") or {}).get("result") or []
    if not results:
        return []

    result = results[0]
    timestamps = result.get("timestamp") or []
    quotes = (result.get("indicators") or {}).get("quote") or [{}]
    closes = quotes[0].get("close") or []

    history = []
    for ts, close in zip(timestamps, closes):
        if close is None:
            continue
        history.append(HistoryPoint(
            date=datetime.fromtimestamp(ts, pytz.utc).replace(tzinfo=None),
            close=close,
        ))
    return history


class YahooHistorySource:
    """Daily closes for a SET listing (``PTT.BK``) from the Yahoo chart API."""

    url_template = "https://query1.finance.yahoo.com/v8/finance/chart/{symbol}.BK"

    def __init__(
        self,
        range_: str = "1mo",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.range = range_
        self.timeout = timeout if timeout is not None else settings.PRICE_SOURCE_TIMEOUT
        self.transport = transport

    async def fetch_history(self, symbol: str) -> list[HistoryPoint]:
        url = self.url_template.format(symbol=symbol.strip().upper())
        params = {"range": self.range, "interval": "1d"}
        logger.info("Fetching historical data for %s from %s", symbol, url)

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"User-Agent": "Mozilla/5.0"},
                transport=self.transport,
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Error fetching history for %s: %s", symbol, e)
            return []

        history = parse_chart(payload)
        if not history:
            logger.warning("No data found for %s", symbol)
        return history
