"""Saved products and followed suppliers"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .catalog_dtos import ProductResponse
from .profile_dtos import SupplierResponse


class SaveProductDto(BaseModel):
    product_id: int


class FollowSupplierDto(BaseModel):
    supplier_id: int


class SavedProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    buyer_id: int
    product_id: int
    created_at: datetime
    product: Optional[ProductResponse] = None


class FollowedSupplierResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    buyer_id: int
    supplier_id: int
    created_at: datetime
    supplier: Optional[SupplierResponse] = None
