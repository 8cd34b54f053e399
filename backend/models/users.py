# backend/models/user.py
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from database import Base, new_id, utcnow
from utils.codec import VersionedJSON
from schemas.common import Permissions


# A department role; notifications can be addressed to every member of a role
class Role(Base):
    __tablename__ = "roles"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False, index=True)
    permissions = Column(VersionedJSON(Permissions), nullable=False, default=list)  # allowed modules
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


# Represents a user account with authentication details and its role
class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=new_id)
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role_id = Column(String, ForeignKey("roles.id"), nullable=False)
    full_name = Column(String, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    role = relationship("Role", lazy="joined")

    @property
    def role_name(self):
        return self.role.name if self.role else None
