# backend/routes/customers.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy import or_
from sqlalchemy.orm import Session

from database import get_db
from models.customer import Customer
from utils.audit import write_log, client_ip
from utils.crud import get_or_404, create_values, apply_updates
from schemas.common import SuccessResponse
from schemas.customer import CustomerCreate, CustomerUpdate, CustomerOut

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=List[CustomerOut])
def list_customers(
    q: Optional[str] = Query(None, description="Search company or contact name"),
    db: Session = Depends(get_db),
):
    query = db.query(Customer)
    if q:
        like = f"%{q}%"
        query = query.filter(or_(Customer.company_name.ilike(like), Customer.contact_name.ilike(like)))
    return query.order_by(Customer.created_at.desc()).all()


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, Customer, customer_id, "Customer")


@router.post("", response_model=CustomerOut, status_code=201)
def create_customer(payload: CustomerCreate, request: Request, db: Session = Depends(get_db)):
    customer = Customer(**create_values(payload))
    db.add(customer)
    db.commit()
    db.refresh(customer)

    write_log(db, user_id=None, action="CUSTOMER_CREATE", resource="customers",
              ip=client_ip(request), meta={"customer_id": customer.id})
    return customer


@router.patch("/{customer_id}", response_model=CustomerOut)
def update_customer(customer_id: str, payload: CustomerUpdate, db: Session = Depends(get_db)):
    customer = get_or_404(db, Customer, customer_id, "Customer")
    apply_updates(customer, payload)
    db.commit()
    db.refresh(customer)
    return customer


# Fails with 409 while orders still reference the customer
@router.delete("/{customer_id}", response_model=SuccessResponse)
def delete_customer(customer_id: str, request: Request, db: Session = Depends(get_db)):
    customer = get_or_404(db, Customer, customer_id, "Customer")
    db.delete(customer)
    db.commit()

    write_log(db, user_id=None, action="CUSTOMER_DELETE", resource="customers",
              ip=client_ip(request), meta={"customer_id": customer_id})
    return SuccessResponse()
