from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from thai_stock.core.database import Base
from thai_stock.core.market_clock import utc_now


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(unique=True, index=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
