import logging
import re

import httpx
from bs4 import BeautifulSoup

from thai_stock.core.config import settings


logger = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
}


def parse_price(html: str) -> float | None:
    """Extract the last price from a Google Finance quote page."""
    soup = BeautifulSoup(html, "html.parser")
    node = soup.select_one(".YMlKec.fxKbKc")
    if node is None:
        return None

    # "฿34.50", "1,234.00" -> digits and dot only
    cleaned = re.sub(r"[^0-9.]", "", node.get_text())
    try:
        return float(cleaned)
    except ValueError:
        return None


class GoogleFinancePriceSource:
    """Scrapes the Google Finance quote page of a SET listing (``PTT:BKK``)."""

    url_template = "https://www.google.com/finance/quote/{symbol}:BKK"

    def __init__(self, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout if timeout is not None else settings.PRICE_SOURCE_TIMEOUT
        self.transport = transport

    async def fetch_price(self, symbol: str) -> float | None:
        url = self.url_template.format(symbol=symbol.strip().upper())
        logger.info("Fetching price for %s from %s", symbol, url)

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers=BROWSER_HEADERS,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Error fetching stock price for %s: %s", symbol, e)
            return None

        price = parse_price(response.text)
        if price is None:
            logger.warning("Failed to parse price for %s", symbol)
        return price
