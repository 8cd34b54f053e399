# backend/schemas/stock.py
from datetime import datetime
from typing import Optional
from pydantic import Field
from schemas.common import CamelModel

# Base schema for a stock ledger row
class StockItemBase(CamelModel):
    stock_number: str
    company: str
    product: str
    quantity: float
    unit: str = "adet"
    category: Optional[str] = None  # procurement / finished / scrap
    product_id: Optional[str] = None
    notes: Optional[str] = None

# Schema for creating a new stock row
class StockItemCreate(StockItemBase):
    id: Optional[str] = None
    created_at: Optional[datetime] = None

# Either set the quantity outright or deduct from it
class StockItemPatch(CamelModel):
    quantity: Optional[float] = None
    deduct: Optional[float] = Field(default=None, gt=0)
    notes: Optional[str] = None

# Schema for returning stock rows
class StockItemOut(StockItemBase):
    id: str
    created_at: datetime
