# backend/models/product.py
from sqlalchemy import Column, String, Text, DateTime
from database import Base, new_id, utcnow
from utils.codec import VersionedJSON
from schemas.common import (
    Dimensions, Inks, ProductFeatures, WindowDetails, LidDetails, ProductImages
)
from typing import Optional

# Model Product
# A box specification sold to customers: type and shape of the box,
# dimensions, inks and finishing features, plus reference images.
class Product(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True, default=new_id)
    code = Column(String, nullable=False, index=True)
    name = Column(String, nullable=True, index=True)
    product_type = Column(String, nullable=True)  # percinli / sivama
    box_shape = Column(String, nullable=True)

    dimensions = Column(VersionedJSON(Optional[Dimensions]), nullable=True)
    inks = Column(VersionedJSON(Optional[Inks]), nullable=True)
    features = Column(VersionedJSON(ProductFeatures), nullable=False, default=dict)
    details = Column(Text, nullable=True)
    window_details = Column(VersionedJSON(Optional[WindowDetails]), nullable=True)
    lid_details = Column(VersionedJSON(Optional[LidDetails]), nullable=True)
    images = Column(VersionedJSON(Optional[ProductImages]), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
