# backend/schemas/product.py
from datetime import datetime
from typing import Optional
from pydantic import Field
from schemas.common import (
    CamelModel, Dimensions, Inks, ProductFeatures,
    WindowDetails, LidDetails, ProductImages,
)


# Shared base attributes for box specifications
class ProductBase(CamelModel):
    code: str
    name: Optional[str] = None
    product_type: Optional[str] = None
    box_shape: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    inks: Optional[Inks] = None
    features: ProductFeatures = Field(default_factory=ProductFeatures)
    details: Optional[str] = None
    window_details: Optional[WindowDetails] = None
    lid_details: Optional[LidDetails] = None
    images: Optional[ProductImages] = None


# Schema for creating a new product (id may be chosen by the client)
class ProductCreate(ProductBase):
    id: Optional[str] = None
    created_at: Optional[datetime] = None


# Schema for PATCH requests - all fields optional
class ProductUpdate(CamelModel):
    code: Optional[str] = None
    name: Optional[str] = None
    product_type: Optional[str] = None
    box_shape: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    inks: Optional[Inks] = None
    features: Optional[ProductFeatures] = None
    details: Optional[str] = None
    window_details: Optional[WindowDetails] = None
    lid_details: Optional[LidDetails] = None
    images: Optional[ProductImages] = None


class ProductOut(ProductBase):
    id: str
    created_at: datetime
