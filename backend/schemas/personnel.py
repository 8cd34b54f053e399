from datetime import datetime
from typing import Dict, List, Literal, Optional
from pydantic import Field
from schemas.common import CamelModel


class PersonnelFields(CamelModel):
    department: Optional[str] = None
    birth_date: Optional[str] = None
    birth_place: Optional[str] = None
    tc_number: Optional[str] = None
    address: Optional[str] = None
    home_phone: Optional[str] = None
    mobile_phone: Optional[str] = None
    email: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_relation: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    marital_status: Optional[str] = None
    ssk_number: Optional[str] = None
    start_date: Optional[str] = None
    recruitment_place: Optional[str] = None
    end_date: Optional[str] = None
    exit_reason: Optional[str] = None
    children_count: Optional[int] = None
    children_ages: Optional[List[int]] = None
    parents_status: Optional[str] = None
    has_disability: Optional[bool] = None
    disability_description: Optional[str] = None
    documents: Optional[Dict[str, str]] = None


class PersonnelCreate(PersonnelFields):
    id: Optional[str] = None
    first_name: str
    last_name: str
    role: str
    created_at: Optional[datetime] = None


class PersonnelUpdate(PersonnelFields):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None


class PersonnelOut(PersonnelFields):
    id: str
    first_name: str
    last_name: str
    role: str
    created_at: datetime


# Machines
class MachineBase(CamelModel):
    machine_number: str
    features: Optional[str] = None
    maintenance_interval: Optional[str] = None
    last_maintenance: Optional[str] = None


class MachineCreate(MachineBase):
    id: Optional[str] = None
    created_at: Optional[datetime] = None


class MachineUpdate(CamelModel):
    machine_number: Optional[str] = None
    features: Optional[str] = None
    maintenance_interval: Optional[str] = None
    last_maintenance: Optional[str] = None


class MachineOut(MachineBase):
    id: str
    created_at: datetime


# Shifts
ShiftStatus = Literal["planned", "active", "completed"]


class ShiftCreate(CamelModel):
    id: Optional[str] = None
    order_id: Optional[str] = None
    machine_id: str
    supervisor_id: Optional[str] = None
    personnel_ids: List[str] = Field(default_factory=list)
    start_time: str
    end_time: Optional[str] = None
    planned_quantity: float = 0
    produced_quantity: float = 0
    scrap_quantity: float = 0
    status: ShiftStatus = "planned"
    created_at: Optional[datetime] = None


class ShiftUpdate(CamelModel):
    order_id: Optional[str] = None
    machine_id: Optional[str] = None
    supervisor_id: Optional[str] = None
    personnel_ids: Optional[List[str]] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    planned_quantity: Optional[float] = None
    produced_quantity: Optional[float] = None
    scrap_quantity: Optional[float] = None
    status: Optional[ShiftStatus] = None


class ShiftOut(CamelModel):
    id: str
    order_id: Optional[str] = None
    machine_id: str
    supervisor_id: Optional[str] = None
    personnel_ids: List[str]
    start_time: str
    end_time: Optional[str] = None
    planned_quantity: float
    produced_quantity: float
    scrap_quantity: float
    status: str
    created_at: datetime
