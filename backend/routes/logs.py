# backend/routes/logs.py
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date, datetime, time

from database import get_db
from models.log import Log
from schemas.log import LogPage, ClientLogCreate
from utils.audit import write_log, client_ip

router = APIRouter(prefix="/logs", tags=["Logs"])


@router.get("", response_model=LogPage)
def get_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100, alias="pageSize"),
    action: Optional[str] = Query(None, description="Filter by action"),
    user_id: Optional[str] = Query(None, alias="userId", description="Filter by user id"),
    resource: Optional[str] = Query(None, description="Filter by resource"),
    status: Optional[str] = Query(None, description="Filter by status (SUCCESS/FAIL/ERROR)"),
    date_from: Optional[date] = Query(None, alias="dateFrom", description="From date (YYYY-MM-DD)"),
    date_to: Optional[date] = Query(None, alias="dateTo", description="To date (YYYY-MM-DD), inclusive"),
    db: Session = Depends(get_db),
):
    query = db.query(Log)

    # 1. Action
    if action:
        query = query.filter(Log.action.ilike(f"%{action}%"))

    # 2. User
    if user_id:
        query = query.filter(Log.user_id == user_id)

    # 3. Resource
    if resource:
        query = query.filter(Log.resource.ilike(f"%{resource}%"))

    # 4. Status
    if status:
        query = query.filter(Log.status == status)

    # 5. Date range, whole days
    if date_from:
        query = query.filter(Log.ts >= datetime.combine(date_from, time.min))
    if date_to:
        query = query.filter(Log.ts <= datetime.combine(date_to, time.max))

    query = query.order_by(Log.ts.desc(), Log.id.desc())

    total = query.count()
    logs = query.offset((page - 1) * page_size).limit(page_size).all()

    return {
        "items": logs,
        "total": total,
        "page": page,
        "page_size": page_size,
    }


# Browser-side errors (error boundary, failed requests) reported by the UI
@router.post("", status_code=201)
def report_client_error(payload: ClientLogCreate, request: Request, db: Session = Depends(get_db)):
    meta = dict(payload.meta or {})
    meta["message"] = payload.message
    write_log(db, user_id=payload.user_id, action=payload.action, resource=payload.resource,
              status="ERROR", ip=client_ip(request), meta=meta)
    return {"success": True}
