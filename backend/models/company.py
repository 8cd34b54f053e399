from sqlalchemy import Column, Integer, String
from database import Base


# Letterhead details of the company running the system (single row)
class CompanySettings(Base):
    __tablename__ = "company_settings"

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String, nullable=True)
    contact_name = Column(String, nullable=True)
    address = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    mobile = Column(String, nullable=True)
    logo_url = Column(String, nullable=True)
