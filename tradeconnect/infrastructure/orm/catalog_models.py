"""Category and product ORM models"""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import ProductStatus
from .types import enum_column_type


class CategoryModel(Base):
    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    icon = Column(String, nullable=True)
    image = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    parent_id = Column(Integer, ForeignKey('categories.id'), nullable=True, index=True)
    product_count = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)
    created_by = Column(Integer, nullable=True)
    created_at = Column(DateTime, server_default=func.now())


class ProductModel(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, index=True)
    supplier_id = Column(Integer, ForeignKey('supplier_profiles.id'), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey('categories.id'), nullable=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=True)
    min_price = Column(Float, nullable=True)
    max_price = Column(Float, nullable=True)
    min_order = Column(Integer, nullable=True)
    unit = Column(String, nullable=True)
    images = Column(JSON, default=list, nullable=False)
    video_url = Column(String, nullable=True)
    specifications = Column(Text, nullable=True)

    materials = Column(String, nullable=True)
    color = Column(String, nullable=True)
    size = Column(String, nullable=True)
    weight = Column(String, nullable=True)
    dimensions = Column(String, nullable=True)
    shipping_terms = Column(String, nullable=True)
    incoterms = Column(String, nullable=True)
    packaging_details = Column(Text, nullable=True)
    lead_time = Column(String, nullable=True)
    payment_terms = Column(String, nullable=True)
    certifications = Column(JSON, default=list, nullable=False)
    quality_grade = Column(String, nullable=True)
    origin = Column(String, nullable=True)
    supply_capacity = Column(String, nullable=True)
    moq = Column(String, nullable=True)
    source_url = Column(String, nullable=True)

    status = Column(enum_column_type(ProductStatus), default=ProductStatus.PENDING, nullable=False, index=True)

    views = Column(Integer, default=0, nullable=False)
    inquiries = Column(Integer, default=0, nullable=False)
    rating = Column(Float, default=0.0, nullable=False)

    reviewed_by = Column(Integer, nullable=True)
    reviewed_at = Column(DateTime, nullable=True)
    review_notes = Column(Text, nullable=True)
    rejected_by = Column(Integer, nullable=True)
    rejected_at = Column(DateTime, nullable=True)
    rejection_reason = Column(Text, nullable=True)
    suspended_by = Column(Integer, nullable=True)
    suspended_at = Column(DateTime, nullable=True)
    suspension_reason = Column(Text, nullable=True)
    restored_by = Column(Integer, nullable=True)
    restored_at = Column(DateTime, nullable=True)
    deleted_by = Column(Integer, nullable=True)
    deleted_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
