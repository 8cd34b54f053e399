from datetime import datetime
from typing import List, Optional
from schemas.common import CamelModel


class MessageCreate(CamelModel):
    id: Optional[str] = None
    thread_id: Optional[str] = None
    sender_id: str
    sender_name: Optional[str] = None
    recipient_id: str
    recipient_name: Optional[str] = None
    subject: Optional[str] = None
    content: str
    related_order_id: Optional[str] = None
    created_at: Optional[datetime] = None


class MessageOut(CamelModel):
    id: str
    thread_id: Optional[str] = None
    sender_id: str
    sender_name: Optional[str] = None
    recipient_id: str
    recipient_name: Optional[str] = None
    subject: Optional[str] = None
    content: str
    related_order_id: Optional[str] = None
    is_read: bool
    created_at: datetime


class NotificationOut(CamelModel):
    id: str
    user_id: Optional[str] = None
    role_id: Optional[str] = None
    title: str
    message: str
    type: str
    related_id: Optional[str] = None
    is_read: bool
    created_at: datetime


class MarkReadRequest(CamelModel):
    ids: List[str]


class MarkReadResponse(CamelModel):
    updated: int
