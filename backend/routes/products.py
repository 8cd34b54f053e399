# backend/routes/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy import or_
from sqlalchemy.orm import Session

from database import get_db
from models.product import Product
from utils.audit import write_log, client_ip
from utils.crud import get_or_404, create_values, apply_updates
from schemas.common import SuccessResponse
import schemas.product as product_schemas

router = APIRouter(prefix="/products", tags=["Products"])


# =========================
# PRODUCT LIST
# =========================
@router.get("", response_model=List[product_schemas.ProductOut])
def list_products(
    q: Optional[str] = Query(None, description="Search code or name"),
    product_type: Optional[str] = Query(None, alias="productType"),
    box_shape: Optional[str] = Query(None, alias="boxShape"),
    db: Session = Depends(get_db),
):
    query = db.query(Product)

    if q:
        like = f"%{q}%"
        query = query.filter(or_(Product.code.ilike(like), Product.name.ilike(like)))
    if product_type:
        query = query.filter(Product.product_type == product_type)
    if box_shape:
        query = query.filter(Product.box_shape == box_shape)

    return query.order_by(Product.created_at.desc()).all()


@router.get("/{product_id}", response_model=product_schemas.ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, Product, product_id, "Product")


# =========================
# CREATE / UPDATE / DELETE
# =========================
@router.post("", response_model=product_schemas.ProductOut, status_code=201)
def create_product(payload: product_schemas.ProductCreate, request: Request, db: Session = Depends(get_db)):
    product = Product(**create_values(payload))
    db.add(product)
    db.commit()
    db.refresh(product)

    write_log(db, user_id=None, action="PRODUCT_CREATE", resource="products",
              ip=client_ip(request), meta={"product_id": product.id, "code": product.code})
    return product


@router.patch("/{product_id}", response_model=product_schemas.ProductOut)
def update_product(product_id: str, payload: product_schemas.ProductUpdate, db: Session = Depends(get_db)):
    product = get_or_404(db, Product, product_id, "Product")
    apply_updates(product, payload)
    db.commit()
    db.refresh(product)
    return product


@router.delete("/{product_id}", response_model=SuccessResponse)
def delete_product(product_id: str, request: Request, db: Session = Depends(get_db)):
    product = get_or_404(db, Product, product_id, "Product")
    db.delete(product)
    db.commit()

    write_log(db, user_id=None, action="PRODUCT_DELETE", resource="products",
              ip=client_ip(request), meta={"product_id": product_id})
    return SuccessResponse()
