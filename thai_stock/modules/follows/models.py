from datetime import datetime

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from thai_stock.core.database import Base
from thai_stock.core.market_clock import utc_now


class Follow(Base):
    __tablename__ = "stock_follows"
    __table_args__ = (
        UniqueConstraint("user_id", "stock_id", name="uix_follow_user_stock"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    stock_id: Mapped[int] = mapped_column(ForeignKey("stocks.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
