from sqlalchemy import Column, String, DateTime, UniqueConstraint
from database import Base, new_id, utcnow


# Predefined box size for a product type and shape
class ProductMold(Base):
    __tablename__ = "product_molds"

    id = Column(String, primary_key=True, default=new_id)
    product_type = Column(String, nullable=False)
    box_shape = Column(String, nullable=False)
    dimensions = Column(String, nullable=False)
    label = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        # One mold per type + shape + size
        UniqueConstraint("product_type", "box_shape", "dimensions", name="uq_mold_type_shape_dims"),
    )
