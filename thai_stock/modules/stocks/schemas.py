from datetime import datetime

from pydantic import BaseModel, ConfigDict


class StockOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    symbol: str
    last_price: float
    last_update: datetime | None = None


class QuoteOut(BaseModel):
    symbol: str
    price: float
    timestamp: datetime
