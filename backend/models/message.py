from sqlalchemy import Column, String, Text, Boolean, DateTime
from database import Base, new_id, utcnow


# Direct message between two users, optionally about an order
class Message(Base):
    __tablename__ = "messages"

    id = Column(String, primary_key=True, default=new_id)
    thread_id = Column(String, nullable=True, index=True)
    sender_id = Column(String, nullable=False, index=True)
    sender_name = Column(String, nullable=True)
    recipient_id = Column(String, nullable=False, index=True)
    recipient_name = Column(String, nullable=True)
    subject = Column(String, nullable=True)
    content = Column(Text, nullable=False)
    related_order_id = Column(String, nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


# Append-only notice addressed to one user or to every member of a role
class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String, primary_key=True, default=new_id)
    user_id = Column(String, nullable=True, index=True)
    role_id = Column(String, nullable=True, index=True)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String, nullable=False, default="info")
    related_id = Column(String, nullable=True)  # order id
    is_read = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
