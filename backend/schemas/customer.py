# backend/schemas/customer.py
from datetime import datetime
from typing import Optional
from schemas.common import CamelModel


# Shared customer contact attributes
class CustomerBase(CamelModel):
    company_name: str
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    address: Optional[str] = None


class CustomerCreate(CustomerBase):
    id: Optional[str] = None
    created_at: Optional[datetime] = None


class CustomerUpdate(CamelModel):
    company_name: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    address: Optional[str] = None


class CustomerOut(CustomerBase):
    id: str
    created_at: datetime
