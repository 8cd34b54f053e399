# backend/routes/planning.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from database import get_db
from models.plan import MonthlyPlan, WeeklyPlan
from utils.crud import create_values
from schemas.plan import MonthlyPlanPut, MonthlyPlanOut, WeeklyPlanCreate, WeeklyPlanOut

router = APIRouter(prefix="/planning", tags=["Planning"])


# -----------------------------
# Weekly snapshots
# -----------------------------
@router.get("/weekly", response_model=List[WeeklyPlanOut])
def list_weekly_plans(db: Session = Depends(get_db)):
    return db.query(WeeklyPlan).order_by(WeeklyPlan.week_start_date.desc()).all()


@router.post("/weekly", response_model=WeeklyPlanOut, status_code=201)
def save_weekly_plan(payload: WeeklyPlanCreate, db: Session = Depends(get_db)):
    plan = WeeklyPlan(**create_values(payload))
    db.add(plan)
    db.commit()
    db.refresh(plan)
    return plan


# -----------------------------
# Monthly grid
# -----------------------------
@router.get("/monthly", response_model=List[MonthlyPlanOut])
def list_monthly_plans(
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
):
    query = db.query(MonthlyPlan)
    if year is not None:
        query = query.filter(MonthlyPlan.year == year)
    if month is not None:
        query = query.filter(MonthlyPlan.month == month)
    return query.order_by(MonthlyPlan.year.desc(), MonthlyPlan.month.desc()).all()


# One row per (year, month); saving again replaces the grid
@router.put("/monthly/{year}/{month}", response_model=MonthlyPlanOut)
def upsert_monthly_plan(
    payload: MonthlyPlanPut,
    year: int = Path(..., ge=2000, le=2100),
    month: int = Path(..., ge=1, le=12),
    db: Session = Depends(get_db),
):
    plan = db.query(MonthlyPlan).filter(MonthlyPlan.year == year, MonthlyPlan.month == month).first()
    if plan is None:
        plan = MonthlyPlan(year=year, month=month, plan_data=payload.plan_data)
        db.add(plan)
    else:
        plan.plan_data = payload.plan_data
    db.commit()
    db.refresh(plan)
    return plan
