# backend/routes/company.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from database import get_db
from models.company import CompanySettings
from utils.audit import write_log, client_ip
from schemas.company import CompanySettingsOut, CompanySettingsUpdate

router = APIRouter(prefix="/company-settings", tags=["Company"])

# Letterhead used on printed offers; stored as a single row


# Retrieve company details
@router.get("", response_model=CompanySettingsOut)
def get_company_settings(db: Session = Depends(get_db)):
    c = db.query(CompanySettings).first()
    if not c:
        # Return default empty object if no company record exists
        return CompanySettingsOut()
    return c


# Update company details
@router.put("", response_model=CompanySettingsOut)
def update_company_settings(payload: CompanySettingsUpdate, request: Request, db: Session = Depends(get_db)):
    c = db.query(CompanySettings).first()
    if not c:
        c = CompanySettings()
        db.add(c)

    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(c, key, value)

    db.commit()
    db.refresh(c)

    # Log the company update action
    write_log(
        db,
        user_id=None,
        action="COMPANY_UPDATE",
        resource="company",
        status="SUCCESS",
        ip=client_ip(request),
        meta={"company_id": c.id}
    )

    return c
