from datetime import datetime

from pydantic import BaseModel, ConfigDict


class HistoryEntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    stock_id: int
    date: datetime
    close: float | None = None


class DailyJobResult(BaseModel):
    message: str = "Daily history recorded"
    updated: int


class SeedResult(BaseModel):
    message: str = "History seeding completed"
    stocks_processed: int
    records_created: int
