# backend/schemas/common.py
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


# Base for every API schema: snake_case in Python, camelCase on the wire
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Nested structures stored in JSON columns (see utils.codec)
# ---------------------------------------------------------------------------

class Dimensions(CamelModel):
    length: float = 0
    width: float = 0
    depth: float = 0


class CoatingOption(CamelModel):
    has: bool = False
    code: Optional[str] = None


class Inks(CamelModel):
    cmyk: bool = False
    white: bool = False
    pantones: List[str] = Field(default_factory=list)
    gold_lak: CoatingOption = Field(default_factory=CoatingOption)
    emaye: CoatingOption = Field(default_factory=CoatingOption)
    astar: CoatingOption = Field(default_factory=CoatingOption)
    silver_lak: CoatingOption = Field(default_factory=CoatingOption)
    mold: bool = False


class GofreDetails(CamelModel):
    count: int = 0
    notes: str = ""


class ProductFeatures(CamelModel):
    has_lid: bool = False
    has_window: bool = False
    extras: str = ""
    gofre: bool = False
    gofre_details: Optional[GofreDetails] = None

    # Older clients sent a plain list of feature labels
    @model_validator(mode="before")
    @classmethod
    def _fold_feature_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"extras": ", ".join(str(v) for v in data)}
        return data


class WindowDetails(CamelModel):
    width: float = 0
    height: float = 0
    count: int = 0


class WindowDimensions(CamelModel):
    width: float = 0
    height: float = 0


class LidDetails(CamelModel):
    material: str = ""
    paint: str = ""
    notes: str = ""
    has_gofre: bool = False
    gofre_details: Optional[GofreDetails] = None
    has_window: bool = False
    window_dimensions: Optional[WindowDimensions] = None
    dimensions: Optional[Dimensions] = None


class ProductImages(CamelModel):
    customer: List[str] = Field(default_factory=list)


class OrderLine(CamelModel):
    id: Optional[str] = None
    product_id: str
    product_name: str = ""
    quantity: float = Field(ge=0)
    unit_price: float = 0
    vat_rate: float = 0
    total: Optional[float] = None

    # Line total including VAT, filled in when the client left it out
    @model_validator(mode="after")
    def _compute_total(self):
        if self.total is None:
            self.total = round(self.quantity * self.unit_price * (1 + self.vat_rate / 100), 2)
        return self


class DesignImageRef(CamelModel):
    url: str
    product_id: Optional[str] = None


DesignImage = Union[str, DesignImageRef]


class PhaseQuantities(CamelModel):
    plate: float = 0
    body: float = 0
    lid: float = 0
    bottom: float = 0


PhaseDetails = Dict[str, PhaseQuantities]
Permissions = List[str]
PlanGrid = Dict[str, Any]


# Simple acknowledgement body returned by delete endpoints
class SuccessResponse(BaseModel):
    success: bool = True
