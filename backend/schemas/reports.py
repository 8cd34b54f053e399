# schemas/reports.py
from datetime import datetime
from typing import List, Optional
from schemas.common import CamelModel

# Orders and amounts for one month and currency
class SalesSummaryItem(CamelModel):
    period: str  # YYYY-MM
    currency: str
    orders: int
    subtotal: float
    vat_total: float
    grand_total: float

class SalesSummaryResponse(CamelModel):
    items: List[SalesSummaryItem]
    total_orders: int
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None

class StatusCount(CamelModel):
    status: str
    orders: int

# Net quantity on hand per product and ledger category
class StockSummaryItem(CamelModel):
    product: str
    product_id: Optional[str] = None
    category: Optional[str] = None
    unit: str
    quantity: float
