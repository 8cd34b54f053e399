from sqlalchemy import Column, String, Float, Integer, ForeignKey, DateTime
from database import Base, new_id, utcnow
from utils.codec import VersionedJSON
from schemas.common import OrderLine, DesignImage, PhaseDetails
from typing import Dict, List, Optional


class Order(Base):
    __tablename__ = "orders"

    id = Column(String, primary_key=True, default=new_id)
    customer_id = Column(String, ForeignKey("customers.id"), nullable=False, index=True)
    customer_name = Column(String, nullable=False)  # snapshot at order time
    items = Column(VersionedJSON(List[OrderLine]), nullable=False, default=list)
    currency = Column(String, nullable=False, default="TRY")

    # Totals are calculated by the sales form and stored as sent
    subtotal = Column(Float, nullable=False, default=0)
    vat_total = Column(Float, nullable=False, default=0)
    grand_total = Column(Float, nullable=False, default=0)

    status = Column(String, nullable=False, default="created", index=True)
    design_images = Column(VersionedJSON(Optional[List[DesignImage]]), nullable=True)
    deadline = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Design department job info
    job_size = Column(String, nullable=True)
    box_size = Column(String, nullable=True)
    efficiency = Column(String, nullable=True)

    # Current assignee (a user, or a whole department)
    assigned_user_id = Column(String, nullable=True, index=True)
    assigned_user_name = Column(String, nullable=True)
    assigned_role_name = Column(String, nullable=True, index=True)

    # Per-department sub-status and details
    design_status = Column(String, nullable=True)
    procurement_status = Column(String, nullable=True)
    production_status = Column(String, nullable=True)
    procurement_date = Column(String, nullable=True)
    stock_usage = Column(VersionedJSON(Optional[Dict[str, float]]), nullable=True)
    procurement_details = Column(VersionedJSON(Optional[PhaseDetails]), nullable=True)
    production_approved_details = Column(VersionedJSON(Optional[PhaseDetails]), nullable=True)
    production_diffs = Column(VersionedJSON(Optional[PhaseDetails]), nullable=True)

    # Accounting and shipping documents
    invoice_url = Column(String, nullable=True)
    waybill_url = Column(String, nullable=True)
    additional_doc_url = Column(String, nullable=True)

    # Shipment details
    packaging_type = Column(String, nullable=True)
    packaging_count = Column(Float, nullable=True)
    package_number = Column(String, nullable=True)
    vehicle_plate = Column(String, nullable=True)
    trailer_plate = Column(String, nullable=True)

    # Payment terms and add-on charges
    payment_method = Column(String, nullable=True)  # havale_eft / cek / cari_hesap
    maturity_days = Column(Integer, nullable=True)
    prepayment_amount = Column(String, nullable=True)
    gofre_price = Column(Float, nullable=True)
    gofre_quantity = Column(Float, nullable=True)
    gofre_unit_price = Column(Float, nullable=True)
    gofre_vat_rate = Column(Float, nullable=True)
    shipping_price = Column(Float, nullable=True)
    shipping_vat_rate = Column(Float, nullable=True)
