# backend/routes/personnel.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.personnel import Personnel, Machine, Shift
from utils.crud import get_or_404, create_values, apply_updates
from schemas.common import SuccessResponse
import schemas.personnel as schemas

router = APIRouter(tags=["Personnel"])


# =========================
# PERSONNEL
# =========================
@router.get("/personnel", response_model=List[schemas.PersonnelOut])
def list_personnel(department: Optional[str] = Query(None), db: Session = Depends(get_db)):
    query = db.query(Personnel)
    if department:
        query = query.filter(Personnel.department == department)
    return query.order_by(Personnel.created_at.desc()).all()


@router.get("/personnel/{person_id}", response_model=schemas.PersonnelOut)
def get_personnel(person_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, Personnel, person_id, "Personnel")


@router.post("/personnel", response_model=schemas.PersonnelOut, status_code=201)
def create_personnel(payload: schemas.PersonnelCreate, db: Session = Depends(get_db)):
    person = Personnel(**create_values(payload))
    db.add(person)
    db.commit()
    db.refresh(person)
    return person


@router.patch("/personnel/{person_id}", response_model=schemas.PersonnelOut)
def update_personnel(person_id: str, payload: schemas.PersonnelUpdate, db: Session = Depends(get_db)):
    person = get_or_404(db, Personnel, person_id, "Personnel")
    apply_updates(person, payload)
    db.commit()
    db.refresh(person)
    return person


@router.delete("/personnel/{person_id}", response_model=SuccessResponse)
def delete_personnel(person_id: str, db: Session = Depends(get_db)):
    db.delete(get_or_404(db, Personnel, person_id, "Personnel"))
    db.commit()
    return SuccessResponse()


# =========================
# MACHINES
# =========================
@router.get("/machines", response_model=List[schemas.MachineOut])
def list_machines(db: Session = Depends(get_db)):
    return db.query(Machine).order_by(Machine.created_at.desc()).all()


@router.post("/machines", response_model=schemas.MachineOut, status_code=201)
def create_machine(payload: schemas.MachineCreate, db: Session = Depends(get_db)):
    machine = Machine(**create_values(payload))
    db.add(machine)
    db.commit()
    db.refresh(machine)
    return machine


@router.patch("/machines/{machine_id}", response_model=schemas.MachineOut)
def update_machine(machine_id: str, payload: schemas.MachineUpdate, db: Session = Depends(get_db)):
    machine = get_or_404(db, Machine, machine_id, "Machine")
    apply_updates(machine, payload)
    db.commit()
    db.refresh(machine)
    return machine


@router.delete("/machines/{machine_id}", response_model=SuccessResponse)
def delete_machine(machine_id: str, db: Session = Depends(get_db)):
    db.delete(get_or_404(db, Machine, machine_id, "Machine"))
    db.commit()
    return SuccessResponse()


# =========================
# SHIFTS
# =========================
@router.get("/shifts", response_model=List[schemas.ShiftOut])
def list_shifts(
    order_id: Optional[str] = Query(None, alias="orderId"),
    machine_id: Optional[str] = Query(None, alias="machineId"),
    status: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    query = db.query(Shift)
    if order_id:
        query = query.filter(Shift.order_id == order_id)
    if machine_id:
        query = query.filter(Shift.machine_id == machine_id)
    if status:
        query = query.filter(Shift.status == status)
    return query.order_by(Shift.start_time.desc()).all()


@router.post("/shifts", response_model=schemas.ShiftOut, status_code=201)
def create_shift(payload: schemas.ShiftCreate, db: Session = Depends(get_db)):
    shift = Shift(**create_values(payload))
    db.add(shift)
    db.commit()
    db.refresh(shift)
    return shift


@router.patch("/shifts/{shift_id}", response_model=schemas.ShiftOut)
def update_shift(shift_id: str, payload: schemas.ShiftUpdate, db: Session = Depends(get_db)):
    shift = get_or_404(db, Shift, shift_id, "Shift")
    apply_updates(shift, payload)
    db.commit()
    db.refresh(shift)
    return shift


@router.delete("/shifts/{shift_id}", response_model=SuccessResponse)
def delete_shift(shift_id: str, db: Session = Depends(get_db)):
    db.delete(get_or_404(db, Shift, shift_id, "Shift"))
    db.commit()
    return SuccessResponse()
