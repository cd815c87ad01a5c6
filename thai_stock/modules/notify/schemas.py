from pydantic import BaseModel, EmailStr


class SummaryRequest(BaseModel):
    email: EmailStr


class SummaryRow(BaseModel):
    symbol: str
    price: float
    stored_price: float


class SummaryOut(BaseModel):
    message: str
    stocks: int
