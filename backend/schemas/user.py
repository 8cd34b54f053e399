from datetime import datetime
from typing import List, Optional
from pydantic import Field
from schemas.common import CamelModel, Permissions


# Department roles
class RoleCreate(CamelModel):
    id: Optional[str] = None
    name: str
    permissions: Permissions = Field(default_factory=list)
    created_at: Optional[datetime] = None


class RoleUpdate(CamelModel):
    name: Optional[str] = None
    permissions: Optional[Permissions] = None


class RoleOut(CamelModel):
    id: str
    name: str
    permissions: List[str]
    created_at: datetime


# Schema for creating user accounts
class UserCreate(CamelModel):
    id: Optional[str] = None
    username: str
    password: str = Field(min_length=1)
    role_id: str
    full_name: str
    is_active: bool = True
    created_at: Optional[datetime] = None


class UserUpdate(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, min_length=1)
    role_id: Optional[str] = None
    full_name: Optional[str] = None
    is_active: Optional[bool] = None


# Output schema for user profile details (never carries the password)
class UserOut(CamelModel):
    id: str
    username: str
    full_name: str
    role_id: str
    role_name: Optional[str] = None
    is_active: bool
    created_at: datetime


# Schema for user authentication credentials
class UserLogin(CamelModel):
    username: str
    password: str


class SessionUser(UserOut):
    permissions: List[str] = Field(default_factory=list)


# Schema for JWT authentication token response
class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: SessionUser
