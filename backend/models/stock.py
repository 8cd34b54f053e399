# backend/models/stock.py
from sqlalchemy import Column, String, Float, Text, DateTime
from database import Base, new_id, utcnow

class StockItem(Base):
    __tablename__ = "stock_items"

    id = Column(String, primary_key=True, default=new_id)
    stock_number = Column(String, nullable=False, index=True)
    company = Column(String, nullable=False)
    product = Column(String, nullable=False)

    # Signed quantity: shipments are recorded as negative rows
    quantity = Column(Float, nullable=False)
    unit = Column(String, nullable=False, default="adet")

    # Ledger classification (procurement, finished, scrap)
    category = Column(String, nullable=True, index=True)
    product_id = Column(String, nullable=True, index=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
