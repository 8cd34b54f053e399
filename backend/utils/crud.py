# utils/crud.py
from typing import Any, Dict, Type

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session


def get_or_404(db: Session, model: Type, item_id: Any, label: str):
    obj = db.get(model, item_id)
    if obj is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return obj


def create_values(payload: BaseModel) -> Dict[str, Any]:
    """Column values for a new row; client-supplied id/createdAt are kept, missing ones left to defaults."""
    values = payload.model_dump()
    for key in ("id", "created_at"):
        if values.get(key) is None:
            values.pop(key, None)
    return values


def apply_updates(obj, payload: BaseModel) -> Dict[str, Any]:
    """Copy the fields present in a PATCH body onto ``obj``; returns what was set."""
    changes = payload.model_dump(exclude_unset=True)
    for key, value in changes.items():
        setattr(obj, key, value)
    return changes
