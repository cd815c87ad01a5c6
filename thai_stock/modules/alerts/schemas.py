from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from thai_stock.modules.stocks.schemas import StockOut
from thai_stock.modules.users.schemas import User


class AlertCreate(BaseModel):
    symbol: str = Field(..., min_length=1)
    target_price: float = Field(..., gt=0)
    condition: str = Field(..., pattern="^(GT|LT)$")
    user_email: EmailStr

    @field_validator("symbol")
    def normalize_symbol(cls, v):
        v = v.strip().upper()
        if not v:
            raise ValueError("Symbol must not be blank")
        return v


class AlertOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    stock_id: int
    target_price: float
    condition: str
    is_active: bool
    created_at: datetime
    triggered_at: datetime | None = None


class AlertWithStock(AlertOut):
    stock: StockOut


class ActiveAlert(BaseModel):
    """An active alert together with the stock and user it belongs to."""

    alert: AlertOut
    stock: StockOut
    user: User


class HourlyJobResult(BaseModel):
    message: str
    triggered: int = 0
    skipped: bool = False
