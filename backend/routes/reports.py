# routes/reports.py
from collections import defaultdict
from datetime import datetime
from typing import Optional, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from database import get_db
from models.order import Order
from models.stock import StockItem
from schemas.reports import SalesSummaryResponse, SalesSummaryItem, StatusCount, StockSummaryItem

router = APIRouter(prefix="/reports", tags=["Reports"])

# Cancelled orders are left out of sales figures
EXCLUDED_STATUSES = ("offer_cancelled", "order_cancelled", "production_cancelled")


# -----------------------------
# 1) Sales per month and currency
# -----------------------------
@router.get("/sales-summary", response_model=SalesSummaryResponse)
def report_sales_summary(
    date_from: Optional[datetime] = Query(None, alias="dateFrom"),
    date_to: Optional[datetime] = Query(None, alias="dateTo"),
    db: Session = Depends(get_db),
):
    query = db.query(Order).filter(Order.status.notin_(EXCLUDED_STATUSES))
    if date_from:
        query = query.filter(Order.created_at >= date_from)
    if date_to:
        query = query.filter(Order.created_at <= date_to)

    # Grouped in Python: month extraction differs between SQLite and Postgres
    buckets = defaultdict(lambda: {"orders": 0, "subtotal": 0.0, "vat_total": 0.0, "grand_total": 0.0})
    total_orders = 0
    for order in query.all():
        key = (order.created_at.strftime("%Y-%m"), order.currency)
        bucket = buckets[key]
        bucket["orders"] += 1
        bucket["subtotal"] += order.subtotal or 0
        bucket["vat_total"] += order.vat_total or 0
        bucket["grand_total"] += order.grand_total or 0
        total_orders += 1

    items: List[SalesSummaryItem] = [
        SalesSummaryItem(
            period=period,
            currency=currency,
            orders=b["orders"],
            subtotal=round(b["subtotal"], 2),
            vat_total=round(b["vat_total"], 2),
            grand_total=round(b["grand_total"], 2),
        )
        for (period, currency), b in sorted(buckets.items())
    ]
    return SalesSummaryResponse(items=items, total_orders=total_orders, date_from=date_from, date_to=date_to)


# -----------------------------
# 2) Orders per status
# -----------------------------
@router.get("/status-summary", response_model=List[StatusCount])
def report_status_summary(db: Session = Depends(get_db)):
    rows = (db.query(Order.status, func.count(Order.id))
            .group_by(Order.status)
            .order_by(func.count(Order.id).desc(), Order.status)
            .all())
    return [StatusCount(status=status, orders=count) for status, count in rows]


# -----------------------------
# 3) Net stock per product and category
# -----------------------------
@router.get("/stock-summary", response_model=List[StockSummaryItem])
def report_stock_summary(
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    query = db.query(
        StockItem.product,
        StockItem.product_id,
        StockItem.category,
        StockItem.unit,
        func.sum(StockItem.quantity),
    )
    if category:
        query = query.filter(StockItem.category == category)
    rows = (query
            .group_by(StockItem.product, StockItem.product_id, StockItem.category, StockItem.unit)
            .order_by(StockItem.product)
            .all())
    return [
        StockSummaryItem(product=product, product_id=product_id, category=cat, unit=unit, quantity=qty or 0)
        for product, product_id, cat, unit, qty in rows
    ]
