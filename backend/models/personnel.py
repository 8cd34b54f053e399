from sqlalchemy import Column, String, Integer, Float, Boolean, Text, DateTime
from database import Base, new_id, utcnow
from utils.codec import VersionedJSON
from typing import Dict, List, Optional


# HR record of an employee
class Personnel(Base):
    __tablename__ = "personnel"

    id = Column(String, primary_key=True, default=new_id)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    department = Column(String, nullable=True)

    # Identity and contact
    birth_date = Column(String, nullable=True)
    birth_place = Column(String, nullable=True)
    tc_number = Column(String, nullable=True)
    address = Column(Text, nullable=True)
    home_phone = Column(String, nullable=True)
    mobile_phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    emergency_contact_name = Column(String, nullable=True)
    emergency_contact_relation = Column(String, nullable=True)
    emergency_contact_phone = Column(String, nullable=True)

    # Employment
    marital_status = Column(String, nullable=True)
    ssk_number = Column(String, nullable=True)
    start_date = Column(String, nullable=True)
    recruitment_place = Column(String, nullable=True)
    end_date = Column(String, nullable=True)
    exit_reason = Column(String, nullable=True)

    # Family and health
    children_count = Column(Integer, nullable=True)
    children_ages = Column(VersionedJSON(Optional[List[int]]), nullable=True)
    parents_status = Column(String, nullable=True)
    has_disability = Column(Boolean, nullable=True)
    disability_description = Column(String, nullable=True)

    # Uploaded documents: document type -> URL
    documents = Column(VersionedJSON(Optional[Dict[str, str]]), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class Machine(Base):
    __tablename__ = "machines"

    id = Column(String, primary_key=True, default=new_id)
    machine_number = Column(String, nullable=False)
    features = Column(Text, nullable=True)
    maintenance_interval = Column(String, nullable=True)
    last_maintenance = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


# A production shift: one machine running one order with a crew
class Shift(Base):
    __tablename__ = "shifts"

    id = Column(String, primary_key=True, default=new_id)
    order_id = Column(String, nullable=True, index=True)
    machine_id = Column(String, nullable=False, index=True)
    supervisor_id = Column(String, nullable=True)
    personnel_ids = Column(VersionedJSON(List[str]), nullable=False, default=list)
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=True)
    planned_quantity = Column(Float, nullable=False, default=0)
    produced_quantity = Column(Float, nullable=False, default=0)
    scrap_quantity = Column(Float, nullable=False, default=0)
    status = Column(String, nullable=False, default="planned")  # planned / active / completed
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
