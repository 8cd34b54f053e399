# backend/routes/orders.py
import logging
import time
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from models.message import Notification
from models.order import Order
from models.stock import StockItem
from models.users import Role
from utils import workflow
from utils.audit import write_log, client_ip
from utils.crud import get_or_404, create_values
from schemas.common import SuccessResponse
from schemas.order import OrderCreate, OrderUpdate, OrderOut

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger(__name__)

# Columns that cannot be cleared by a PATCH; an explicit null is ignored
REQUIRED_FIELDS = {
    "customer_id", "customer_name", "items", "currency",
    "subtotal", "vat_total", "grand_total", "status",
}


def _snapshot(order: Order) -> dict:
    return {column.key: getattr(order, column.key) for column in Order.__table__.columns}


# Look up a role by name, trying the fallback alias when the primary is missing
def _resolve_role(db: Session, target: workflow.RoleTarget) -> Optional[Role]:
    for name in (target.name, target.fallback):
        if not name:
            continue
        role = db.query(Role).filter(Role.name == name).first()
        if role is not None:
            return role
    return None


def _add_notifications(db: Session, intents: List[workflow.NotificationIntent]) -> int:
    created = 0
    for intent in intents:
        user_id = intent.user_id
        role_id = None
        if intent.role is not None:
            role = _resolve_role(db, intent.role)
            if role is None:
                logger.info("No role named %r (fallback %r), skipping notification %r",
                            intent.role.name, intent.role.fallback, intent.title)
                continue
            role_id = role.id
        db.add(Notification(
            user_id=user_id,
            role_id=role_id,
            title=intent.title,
            message=intent.message,
            type=intent.type,
            related_id=intent.related_id,
        ))
        created += 1
    return created


# Shipped goods leave finished stock as negative ledger rows
def _add_shipment_rows(db: Session, order: Order, deductions: List[workflow.StockDeduction]) -> int:
    stamp = int(time.time() * 1000)
    for deduction in deductions:
        db.add(StockItem(
            stock_number=f"SHIP-{order.id}-{stamp}",
            company=order.customer_name,
            product=deduction.product_name or deduction.product_id,
            quantity=-deduction.quantity,
            unit="adet",
            category="finished",
            product_id=deduction.product_id,
            notes=f"Sevkiyat {workflow.order_ref(order.id)}",
        ))
    return len(deductions)


# =========================
# LIST / DETAIL
# =========================
@router.get("", response_model=List[OrderOut])
def list_orders(
    status: Optional[str] = Query(None),
    customer_id: Optional[str] = Query(None, alias="customerId"),
    assigned_user_id: Optional[str] = Query(None, alias="assignedUserId"),
    assigned_role_name: Optional[str] = Query(None, alias="assignedRoleName"),
    db: Session = Depends(get_db),
):
    query = db.query(Order)
    if status:
        query = query.filter(Order.status == status)
    if customer_id:
        query = query.filter(Order.customer_id == customer_id)
    if assigned_user_id:
        query = query.filter(Order.assigned_user_id == assigned_user_id)
    if assigned_role_name:
        query = query.filter(Order.assigned_role_name == assigned_role_name)
    return query.order_by(Order.created_at.desc()).all()


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, Order, order_id, "Order")


# =========================
# CREATE
# =========================
@router.post("", response_model=OrderOut, status_code=201)
def create_order(payload: OrderCreate, request: Request, db: Session = Depends(get_db)):
    order = Order(**create_values(payload))
    db.add(order)
    db.commit()
    db.refresh(order)

    write_log(db, user_id=None, action="ORDER_CREATE", resource="orders", ip=client_ip(request),
              meta={"order_id": order.id, "customer_id": order.customer_id, "status": order.status})
    return order


# =========================
# UPDATE (workflow)
# =========================
@router.patch("/{order_id}", response_model=OrderOut)
def update_order(order_id: str, payload: OrderUpdate, request: Request, db: Session = Depends(get_db)):
    """
    Partial update of an order. ``items`` is replaced as a whole.

    Status and assignment changes create notifications for the next
    department; entering ``shipping_completed`` books the shipped quantities
    out of finished stock. Field changes and side effects commit together.
    """
    order = get_or_404(db, Order, order_id, "Order")

    changes = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None or key not in REQUIRED_FIELDS
    }

    new_status = changes.get("status")
    if (settings.ENFORCE_WORKFLOW_ORDER and new_status
            and not workflow.is_transition_allowed(order.status, new_status)):
        raise HTTPException(
            status_code=409,
            detail=f"Order cannot move from {order.status} to {new_status}",
        )

    plan = workflow.plan_order_update(_snapshot(order), changes)

    try:
        for key, value in changes.items():
            setattr(order, key, value)
        notified = _add_notifications(db, plan.notifications)
        shipped = _add_shipment_rows(db, order, plan.stock_deductions)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    db.refresh(order)

    if plan.status_changed:
        write_log(db, user_id=None, action="ORDER_STATUS", resource="orders", ip=client_ip(request),
                  meta={"order_id": order.id, "status": order.status,
                        "notifications": notified, "stock_rows": shipped})
    return order


@router.delete("/{order_id}", response_model=SuccessResponse)
def delete_order(order_id: str, request: Request, db: Session = Depends(get_db)):
    order = get_or_404(db, Order, order_id, "Order")
    db.delete(order)
    db.commit()

    write_log(db, user_id=None, action="ORDER_DELETE", resource="orders",
              ip=client_ip(request), meta={"order_id": order_id})
    return SuccessResponse()
