from datetime import datetime

from sqlalchemy import ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from thai_stock.core.database import Base


class StockHistory(Base):
    __tablename__ = "stock_history"
    __table_args__ = (Index("ix_stock_history_stock_date", "stock_id", "date"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    stock_id: Mapped[int] = mapped_column(ForeignKey("stocks.id", ondelete="CASCADE"), index=True)
    date: Mapped[datetime] = mapped_column(nullable=False)
    close: Mapped[float] = mapped_column(nullable=True)
