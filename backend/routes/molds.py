# backend/routes/molds.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from database import get_db
from models.mold import ProductMold
from utils.crud import get_or_404, create_values
from utils.seed import seed_molds
from schemas.common import SuccessResponse
from schemas.mold import MoldCreate, MoldOut, SeedResult

router = APIRouter(prefix="/molds", tags=["Molds"])


@router.get("", response_model=List[MoldOut])
def list_molds(
    product_type: Optional[str] = Query(None, alias="productType"),
    box_shape: Optional[str] = Query(None, alias="boxShape"),
    db: Session = Depends(get_db),
):
    query = db.query(ProductMold)
    if product_type:
        query = query.filter(ProductMold.product_type == product_type)
    if box_shape:
        query = query.filter(ProductMold.box_shape == box_shape)
    return query.order_by(ProductMold.product_type, ProductMold.box_shape, ProductMold.created_at).all()


@router.post("", response_model=MoldOut, status_code=201)
def create_mold(payload: MoldCreate, db: Session = Depends(get_db)):
    exists = db.query(ProductMold).filter(
        ProductMold.product_type == payload.product_type,
        ProductMold.box_shape == payload.box_shape,
        ProductMold.dimensions == payload.dimensions,
    ).first()
    if exists:
        raise HTTPException(status_code=409, detail="Mold already exists for this type, shape and size")

    mold = ProductMold(**create_values(payload))
    db.add(mold)
    db.commit()
    db.refresh(mold)
    return mold


@router.post("/seed-defaults", response_model=SeedResult)
def seed_default_molds(db: Session = Depends(get_db)):
    inserted, skipped = seed_molds(db)
    return SeedResult(inserted=inserted, skipped=skipped)


@router.delete("/{mold_id}", response_model=SuccessResponse)
def delete_mold(mold_id: str, db: Session = Depends(get_db)):
    db.delete(get_or_404(db, ProductMold, mold_id, "Mold"))
    db.commit()
    return SuccessResponse()
