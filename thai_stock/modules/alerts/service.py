import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from thai_stock.core.market_clock import is_market_open, to_utc_naive, utc_now
from thai_stock.modules.alerts.repository import AlertRepository
from thai_stock.modules.alerts.schemas import ActiveAlert, AlertCreate, AlertOut, AlertWithStock, HourlyJobResult
from thai_stock.modules.follows.repository import FollowRepository
from thai_stock.modules.market_data.google_finance import GoogleFinancePriceSource
from thai_stock.modules.market_data.protocols import PriceSource
from thai_stock.modules.notify.email import EmailNotifier
from thai_stock.modules.stocks.repository import StockRepository
from thai_stock.modules.users.repository import UserRepository


logger = logging.getLogger(__name__)

COMPARISON_SIGNS = {"GT": ">=", "LT": "<="}


def is_triggered(condition: str, price: float, target_price: float) -> bool:
    if condition == "GT":
        return price >= target_price
    if condition == "LT":
        return price <= target_price
    return False


class AlertService:
    def __init__(self, session: AsyncSession, price_source: PriceSource | None = None, notifier: EmailNotifier | None = None):
        self.session = session
        self.repo = AlertRepository(session)
        self.user_repo = UserRepository(session)
        self.stock_repo = StockRepository(session)
        self.follow_repo = FollowRepository(session)
        self.price_source = price_source or GoogleFinancePriceSource()
        self.notifier = notifier or EmailNotifier()

    # === CRUD ===
    async def create_alert(self, data: AlertCreate) -> AlertOut:
        user = await self.user_repo.get_or_create(data.user_email)
        stock, _ = await self.stock_repo.get_or_create(data.symbol)

        alert = await self.repo.add(
            user_id=user.id,
            stock_id=stock.id,
            target_price=data.target_price,
            condition=data.condition,
        )

        # Alerting on a stock implies following it
        await self.follow_repo.get_or_create(user.id, stock.id)

        await self.session.commit()
        return alert

    async def list_alerts(self, email: str) -> list[AlertWithStock]:
        user = await self.user_repo.get_by_email(email)
        if not user:
            return []
        return await self.repo.get_for_user(user.id)

    async def delete_alert(self, alert_id: int) -> None:
        await self.repo.delete(id=alert_id)
        await self.session.commit()

    # === Hourly job ===
    async def run_hourly(self, now: datetime | None = None) -> HourlyJobResult:
        """Refresh prices of alerted stocks and fire the alerts whose condition holds.

        Fired alerts are deactivated whether or not the email went out, so an
        alert never fires twice.
        """
        now = now or utc_now()
        if not is_market_open(now):
            logger.info("Market closed, skipping checks.")
            return HourlyJobResult(message="Market Closed", skipped=True)

        alerts = await self.repo.get_all_active()
        if not alerts:
            return HourlyJobResult(message="No active alerts")

        checked_at = to_utc_naive(now)
        symbols = list(dict.fromkeys(record.stock.symbol for record in alerts))
        prices = await self._sync_prices(symbols, checked_at)

        triggered = 0
        for record in alerts:
            price = prices.get(record.stock.symbol)
            if price is None:
                continue
            if not is_triggered(record.alert.condition, price, record.alert.target_price):
                continue

            # claim before sending so a deleted or already fired alert is never emailed
            claimed = await self.repo.deactivate(record.alert.id, triggered_at=checked_at)
            await self.session.commit()
            if not claimed:
                logger.info("Alert %s is no longer active, skipping", record.alert.id)
                continue

            await self._notify(record, price)
            triggered += 1
            logger.info("Alert %s on %s triggered at %s", record.alert.id, record.stock.symbol, price)

        logger.info("Hourly job completed: %s of %s alerts triggered", triggered, len(alerts))
        return HourlyJobResult(message="Hourly job completed", triggered=triggered)

    # === Internal ===
    async def _sync_prices(self, symbols: list[str], checked_at: datetime) -> dict[str, float]:
        prices = {}
        for symbol in symbols:
            price = await self._fetch_price(symbol)
            if price is None:
                continue
            prices[symbol] = price
            await self.stock_repo.update_price(symbol, price, checked_at)

        await self.session.commit()
        return prices

    async def _fetch_price(self, symbol: str) -> float | None:
        try:
            price = await self.price_source.fetch_price(symbol)
        except Exception as e:
            logger.warning("Price fetch for %s failed: %s", symbol, e)
            return None

        # a zero quote is a scraping artifact, not a price
        if not price or price <= 0:
            logger.warning("No price available for %s", symbol)
            return None
        return price

    async def _notify(self, record: ActiveAlert, price: float) -> None:
        symbol = record.stock.symbol
        sign = COMPARISON_SIGNS.get(record.alert.condition, record.alert.condition)
        subject = f"Stock Alert: {symbol} is {price}"
        body = (
            f"Your alert for {symbol} has been triggered.\n"
            f"Current Price: {price}\n"
            f"Target: {record.alert.target_price} ({sign})"
        )

        try:
            delivered = await self.notifier.send(record.user.email, subject, body)
        except Exception as e:
            logger.error("Notifier raised for alert %s: %s", record.alert.id, e)
            delivered = False

        if not delivered:
            logger.warning("Notification for alert %s to %s was not delivered", record.alert.id, record.user.email)
