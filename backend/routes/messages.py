# backend/routes/messages.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session

from database import get_db
from models.message import Message, Notification
from utils.crud import get_or_404, create_values
from schemas.common import SuccessResponse
from schemas.message import (
    MessageCreate, MessageOut, NotificationOut, MarkReadRequest, MarkReadResponse,
)

router = APIRouter(tags=["Messages"])


# =========================
# MESSAGES
# =========================
@router.get("/messages", response_model=List[MessageOut])
def list_messages(user_id: Optional[str] = Query(None, alias="userId"), db: Session = Depends(get_db)):
    """Messages sent or received by a user, newest first."""
    if not user_id:
        return []
    return (db.query(Message)
            .filter(or_(Message.sender_id == user_id, Message.recipient_id == user_id))
            .order_by(Message.created_at.desc())
            .all())


@router.post("/messages", response_model=MessageOut, status_code=201)
def send_message(payload: MessageCreate, db: Session = Depends(get_db)):
    message = Message(**create_values(payload))
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


@router.put("/messages/{message_id}/read", response_model=MessageOut)
def mark_message_read(message_id: str, db: Session = Depends(get_db)):
    message = get_or_404(db, Message, message_id, "Message")
    message.is_read = True
    db.commit()
    db.refresh(message)
    return message


# Admin view over every conversation
@router.get("/admin/messages", response_model=List[MessageOut])
def list_all_messages(db: Session = Depends(get_db)):
    return db.query(Message).order_by(Message.created_at.desc()).all()


@router.delete("/admin/messages/{message_id}", response_model=SuccessResponse)
def delete_message(message_id: str, db: Session = Depends(get_db)):
    db.delete(get_or_404(db, Message, message_id, "Message"))
    db.commit()
    return SuccessResponse()


# =========================
# NOTIFICATIONS
# =========================
@router.get("/notifications", response_model=List[NotificationOut])
def list_notifications(
    user_id: Optional[str] = Query(None, alias="userId"),
    role_id: Optional[str] = Query(None, alias="roleId"),
    db: Session = Depends(get_db),
):
    """Unread notifications for a user or their role, newest first.

    Without ``userId`` and ``roleId`` the list is empty.
    """
    targets = []
    if user_id:
        targets.append(Notification.user_id == user_id)
    if role_id:
        targets.append(Notification.role_id == role_id)
    if not targets:
        return []

    return (db.query(Notification)
            .filter(or_(*targets), Notification.is_read.is_(False))
            .order_by(Notification.created_at.desc())
            .all())


@router.post("/notifications/mark-read", response_model=MarkReadResponse)
def mark_notifications_read(payload: MarkReadRequest, db: Session = Depends(get_db)):
    if not payload.ids:
        return MarkReadResponse(updated=0)
    updated = (db.query(Notification)
               .filter(Notification.id.in_(payload.ids))
               .update({Notification.is_read: True}, synchronize_session=False))
    db.commit()
    return MarkReadResponse(updated=updated)
