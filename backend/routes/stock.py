# backend/routes/stock.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from database import get_db
from models.stock import StockItem
from utils.audit import write_log, client_ip
from utils.crud import get_or_404, create_values
from schemas.common import SuccessResponse
import schemas.stock as stock_schemas

router = APIRouter(prefix="/stock-items", tags=["Stock"])


@router.get("", response_model=List[stock_schemas.StockItemOut])
def list_stock_items(
    category: Optional[str] = Query(None),
    product_id: Optional[str] = Query(None, alias="productId"),
    q: Optional[str] = Query(None, description="Search stock number, company or product"),
    db: Session = Depends(get_db),
):
    query = db.query(StockItem)
    if category:
        query = query.filter(StockItem.category == category)
    if product_id:
        query = query.filter(StockItem.product_id == product_id)
    if q:
        like = f"%{q}%"
        query = query.filter(
            (StockItem.stock_number.ilike(like))
            | (StockItem.company.ilike(like))
            | (StockItem.product.ilike(like))
        )
    return query.order_by(StockItem.created_at.desc()).all()


@router.post("", response_model=stock_schemas.StockItemOut, status_code=201)
def create_stock_item(payload: stock_schemas.StockItemCreate, request: Request, db: Session = Depends(get_db)):
    item = StockItem(**create_values(payload))
    db.add(item)
    db.commit()
    db.refresh(item)

    write_log(db, user_id=None, action="STOCK_CREATE", resource="stock", ip=client_ip(request),
              meta={"stock_item_id": item.id, "quantity": item.quantity, "category": item.category})
    return item


# Set the quantity outright, or deduct from what is on the row
@router.patch("/{item_id}", response_model=stock_schemas.StockItemOut)
def patch_stock_item(item_id: str, payload: stock_schemas.StockItemPatch, request: Request,
                     db: Session = Depends(get_db)):
    if payload.quantity is not None and payload.deduct is not None:
        raise HTTPException(status_code=422, detail="Send either quantity or deduct, not both")

    item = get_or_404(db, StockItem, item_id, "Stock item")
    before = item.quantity

    if payload.quantity is not None:
        item.quantity = payload.quantity
    elif payload.deduct is not None:
        item.quantity = before - payload.deduct
    if payload.notes is not None:
        item.notes = payload.notes

    db.commit()
    db.refresh(item)

    write_log(db, user_id=None, action="STOCK_ADJUST", resource="stock", ip=client_ip(request),
              meta={"stock_item_id": item.id, "before": before, "after": item.quantity})
    return item


@router.delete("/{item_id}", response_model=SuccessResponse)
def delete_stock_item(item_id: str, db: Session = Depends(get_db)):
    item = get_or_404(db, StockItem, item_id, "Stock item")
    db.delete(item)
    db.commit()
    return SuccessResponse()
