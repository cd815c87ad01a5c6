from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from thai_stock.modules.alerts.schemas import AlertOut
from thai_stock.modules.stocks.schemas import StockOut


class FollowCreate(BaseModel):
    symbol: str = Field(..., min_length=1)
    user_email: EmailStr
    price: float | None = Field(None, ge=0)

    @field_validator("symbol")
    def normalize_symbol(cls, v):
        v = v.strip().upper()
        if not v:
            raise ValueError("Symbol must not be blank")
        return v


class FollowOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    stock_id: int
    created_at: datetime


class FollowWithStock(FollowOut):
    stock: StockOut


class FollowDetails(FollowWithStock):
    live_price: float
    alert: AlertOut | None = None


class MessageOut(BaseModel):
    message: str
