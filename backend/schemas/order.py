from datetime import datetime
from typing import Annotated, Dict, List, Literal, Optional

from pydantic import AfterValidator, Field, field_validator

from schemas.common import CamelModel, DesignImage, OrderLine, PhaseDetails

OrderStatus = Literal[
    "created",
    "offer_sent",
    "waiting_manager_approval",
    "manager_approved",
    "revision_requested",
    "offer_accepted",
    "offer_cancelled",
    "supply_design_process",
    "design_pending",
    "design_approved",
    "supply_completed",
    "production_pending",
    "production_planned",
    "production_started",
    "production_completed",
    "invoice_added",
    "shipping_completed",
    "order_completed",
    "order_cancelled",
    "production_cancelled",
]

PaymentMethod = Literal["havale_eft", "cek", "cari_hesap"]


def _unique_products(items: Optional[List[OrderLine]]) -> Optional[List[OrderLine]]:
    if items is None:
        return items
    seen = set()
    for line in items:
        if line.product_id in seen:
            raise ValueError(f"Product {line.product_id} appears more than once in the order")
        seen.add(line.product_id)
    return items

# One line per product; a repeated product id is rejected rather than merged
UniqueLines = Annotated[List[OrderLine], AfterValidator(_unique_products)]


# Fields every department may edit after the order exists
class OrderFields(CamelModel):
    job_size: Optional[str] = None
    box_size: Optional[str] = None
    efficiency: Optional[str] = None

    assigned_user_id: Optional[str] = None
    assigned_user_name: Optional[str] = None
    assigned_role_name: Optional[str] = None

    design_status: Optional[str] = None
    procurement_status: Optional[str] = None
    production_status: Optional[str] = None
    procurement_date: Optional[str] = None
    stock_usage: Optional[Dict[str, float]] = None
    procurement_details: Optional[PhaseDetails] = None
    production_approved_details: Optional[PhaseDetails] = None
    production_diffs: Optional[PhaseDetails] = None

    design_images: Optional[List[DesignImage]] = None
    invoice_url: Optional[str] = None
    waybill_url: Optional[str] = None
    additional_doc_url: Optional[str] = None

    packaging_type: Optional[str] = None
    packaging_count: Optional[float] = None
    package_number: Optional[str] = None
    vehicle_plate: Optional[str] = None
    trailer_plate: Optional[str] = None

    deadline: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    maturity_days: Optional[int] = None
    prepayment_amount: Optional[str] = None
    gofre_price: Optional[float] = None
    gofre_quantity: Optional[float] = None
    gofre_unit_price: Optional[float] = None
    gofre_vat_rate: Optional[float] = None
    shipping_price: Optional[float] = None
    shipping_vat_rate: Optional[float] = None


# Input schema for a new sales order
class OrderCreate(OrderFields):
    id: Optional[str] = None
    customer_id: str
    customer_name: str
    items: UniqueLines = Field(default_factory=list)
    currency: str = "TRY"
    subtotal: float = 0
    vat_total: float = 0
    grand_total: float = 0
    status: OrderStatus = "created"
    created_at: Optional[datetime] = None


# Partial update; only the fields present in the request are written
class OrderUpdate(OrderFields):
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    items: Optional[UniqueLines] = None
    currency: Optional[str] = None
    subtotal: Optional[float] = None
    vat_total: Optional[float] = None
    grand_total: Optional[float] = None
    status: Optional[OrderStatus] = None


# Output schema representing the full order details
class OrderOut(OrderFields):
    id: str
    customer_id: str
    customer_name: str
    items: List[OrderLine]
    currency: str
    subtotal: float
    vat_total: float
    grand_total: float
    status: str
    created_at: datetime

    @field_validator("design_images", mode="before")
    @classmethod
    def _images_default(cls, value):
        return [] if value is None else value
