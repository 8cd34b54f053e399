from sqlalchemy import Column, String, Integer, DateTime, UniqueConstraint
from database import Base, new_id, utcnow
from utils.codec import VersionedJSON
from schemas.common import PlanGrid


# Production plan grid for one calendar month
class MonthlyPlan(Base):
    __tablename__ = "monthly_plans"

    id = Column(String, primary_key=True, default=new_id)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    plan_data = Column(VersionedJSON(PlanGrid), nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("year", "month", name="uq_monthly_plan_period"),
    )


# Archived snapshot of a planning board week
class WeeklyPlan(Base):
    __tablename__ = "weekly_plans"

    id = Column(String, primary_key=True, default=new_id)
    week_start_date = Column(String, nullable=False)
    week_end_date = Column(String, nullable=False)
    plan_data = Column(VersionedJSON(PlanGrid), nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
