from datetime import datetime

from pydantic import BaseModel


class HistoryPoint(BaseModel):
    date: datetime
    close: float
