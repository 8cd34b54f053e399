from datetime import datetime
from typing import Optional
from schemas.common import CamelModel


class MoldBase(CamelModel):
    product_type: str
    box_shape: str
    dimensions: str
    label: Optional[str] = None


class MoldCreate(MoldBase):
    id: Optional[str] = None
    created_at: Optional[datetime] = None


class MoldOut(MoldBase):
    id: str
    created_at: datetime


# Result of seeding the default catalog
class SeedResult(CamelModel):
    inserted: int
    skipped: int
