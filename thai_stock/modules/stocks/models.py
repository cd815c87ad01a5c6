from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from thai_stock.core.database import Base
from thai_stock.core.market_clock import utc_now


class Stock(Base):
    __tablename__ = "stocks"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    symbol: Mapped[str] = mapped_column(unique=True, nullable=False, index=True)  # always uppercase
    last_price: Mapped[float] = mapped_column(default=0)
    last_update: Mapped[datetime] = mapped_column(nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
