from datetime import datetime

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from thai_stock.core.database import Base
from thai_stock.core.market_clock import utc_now


class Alert(Base):
    __tablename__ = "stock_alerts"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    stock_id: Mapped[int] = mapped_column(ForeignKey("stocks.id", ondelete="CASCADE"), nullable=False, index=True)
    target_price: Mapped[float] = mapped_column(nullable=False)
    # "GT" fires when price >= target_price; "LT" when price <= target_price
    condition: Mapped[str] = mapped_column(nullable=False)
    is_active: Mapped[bool] = mapped_column(default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    triggered_at: Mapped[datetime] = mapped_column(nullable=True)
