# backend/routes/users.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from database import get_db
from models import users as models
from schemas import user as schemas
from schemas.common import SuccessResponse
from utils.audit import write_log, client_ip
from utils.crud import get_or_404, create_values, apply_updates
from utils.hashing import get_password_hash

router = APIRouter(tags=["Users"])


def _username_taken(db: Session, username: str, exclude_id: Optional[str] = None) -> bool:
    query = db.query(models.User).filter(models.User.username == username)
    if exclude_id:
        query = query.filter(models.User.id != exclude_id)
    return query.first() is not None


# =========================
# ROLES
# =========================
@router.get("/roles", response_model=List[schemas.RoleOut])
def list_roles(db: Session = Depends(get_db)):
    return db.query(models.Role).order_by(models.Role.created_at.desc()).all()


@router.post("/roles", response_model=schemas.RoleOut, status_code=201)
def create_role(payload: schemas.RoleCreate, db: Session = Depends(get_db)):
    role = models.Role(**create_values(payload))
    db.add(role)
    db.commit()
    db.refresh(role)
    return role


@router.patch("/roles/{role_id}", response_model=schemas.RoleOut)
def update_role(role_id: str, payload: schemas.RoleUpdate, db: Session = Depends(get_db)):
    role = get_or_404(db, models.Role, role_id, "Role")
    apply_updates(role, payload)
    db.commit()
    db.refresh(role)
    return role


# Fails with 409 while users still hold the role
@router.delete("/roles/{role_id}", response_model=SuccessResponse)
def delete_role(role_id: str, db: Session = Depends(get_db)):
    db.delete(get_or_404(db, models.Role, role_id, "Role"))
    db.commit()
    return SuccessResponse()


# =========================
# USERS
# =========================
@router.get("/users", response_model=List[schemas.UserOut])
def list_users(db: Session = Depends(get_db)):
    return db.query(models.User).order_by(models.User.created_at.desc()).all()


@router.post("/users", response_model=schemas.UserOut, status_code=201)
def create_user(payload: schemas.UserCreate, request: Request, db: Session = Depends(get_db)):
    if _username_taken(db, payload.username):
        raise HTTPException(status_code=409, detail="Username already exists")
    get_or_404(db, models.Role, payload.role_id, "Role")

    values = create_values(payload)
    values["password_hash"] = get_password_hash(values.pop("password"))
    user = models.User(**values)
    db.add(user)
    db.commit()
    db.refresh(user)

    write_log(db, user_id=user.id, action="USER_CREATE", resource="users",
              ip=client_ip(request), meta={"username": user.username})
    return user


@router.patch("/users/{user_id}", response_model=schemas.UserOut)
def update_user(user_id: str, payload: schemas.UserUpdate, db: Session = Depends(get_db)):
    user = get_or_404(db, models.User, user_id, "User")
    if payload.username and _username_taken(db, payload.username, exclude_id=user_id):
        raise HTTPException(status_code=409, detail="Username already exists")

    for key, value in payload.model_dump(exclude_unset=True, exclude={"password"}).items():
        if value is not None:
            setattr(user, key, value)
    if payload.password:
        user.password_hash = get_password_hash(payload.password)

    db.commit()
    db.refresh(user)
    return user


@router.delete("/users/{user_id}", response_model=SuccessResponse)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    db.delete(get_or_404(db, models.User, user_id, "User"))
    db.commit()
    return SuccessResponse()
