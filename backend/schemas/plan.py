from datetime import datetime
from typing import Optional
from pydantic import Field
from schemas.common import CamelModel, PlanGrid


class MonthlyPlanPut(CamelModel):
    plan_data: PlanGrid = Field(default_factory=dict)


class MonthlyPlanOut(CamelModel):
    id: str
    year: int
    month: int
    plan_data: PlanGrid
    created_at: datetime
    updated_at: datetime


class WeeklyPlanCreate(CamelModel):
    id: Optional[str] = None
    week_start_date: str
    week_end_date: str
    plan_data: PlanGrid = Field(default_factory=dict)
    created_at: Optional[datetime] = None


class WeeklyPlanOut(CamelModel):
    id: str
    week_start_date: str
    week_end_date: str
    plan_data: PlanGrid
    created_at: datetime
