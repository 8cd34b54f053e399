# backend/routes/auth.py
from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.orm import Session
from utils.hashing import verify_password
from utils.tokenJWT import create_access_token, get_current_user
from utils.audit import write_log, client_ip
from models import users as models
from schemas import user as schemas
from database import get_db

router = APIRouter(prefix="/auth", tags=["Auth"])


def _session_user(user: models.User) -> schemas.SessionUser:
    permissions = list(user.role.permissions or []) if user.role else []
    return schemas.SessionUser.model_validate(user).model_copy(update={"permissions": permissions})


# Authenticate user and issue JWT token
@router.post("/login", response_model=schemas.Token)
def login(payload: schemas.UserLogin, request: Request, db: Session = Depends(get_db)):
    db_user = db.query(models.User).filter(models.User.username == payload.username).first()

    # Validate credentials and log failure on error
    if not db_user or not verify_password(payload.password, db_user.password_hash):
        write_log(db, user_id=(db_user.id if db_user else None), action="LOGIN", resource="auth",
                  status="FAIL", ip=client_ip(request), meta={"username": payload.username})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    if not db_user.is_active:
        write_log(db, user_id=db_user.id, action="LOGIN", resource="auth",
                  status="FAIL", ip=client_ip(request), meta={"username": payload.username, "reason": "inactive"})
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

    session_user = _session_user(db_user)
    access_token = create_access_token(data={"sub": db_user.id, "role": session_user.role_name})

    write_log(db, user_id=db_user.id, action="LOGIN", resource="auth",
              status="SUCCESS", ip=client_ip(request), meta={"username": db_user.username})

    return schemas.Token(access_token=access_token, user=session_user)


# Retrieve current authenticated user details
@router.get("/me", response_model=schemas.SessionUser)
def me(current_user: models.User = Depends(get_current_user)):
    return _session_user(current_user)
