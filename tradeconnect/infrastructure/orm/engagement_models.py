"""Saved product and followed supplier ORM models"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.sql import func

from ...db.models import Base


class SavedProductModel(Base):
    __tablename__ = 'saved_products'

    id = Column(Integer, primary_key=True, index=True)
    buyer_id = Column(Integer, ForeignKey('buyer_profiles.id'), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey('products.id'), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())


class FollowedSupplierModel(Base):
    __tablename__ = 'followed_suppliers'

    id = Column(Integer, primary_key=True, index=True)
    buyer_id = Column(Integer, ForeignKey('buyer_profiles.id'), nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey('supplier_profiles.id'), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())
