"""Category and product DTOs"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...domain.enums import ProductSort, ProductStatus


class CategoryCreateDto(BaseModel):
    name: str = Field(min_length=1)
    icon: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[int] = None
    is_active: bool = True
    sort_order: int = 0


class CategoryUpdateDto(BaseModel):
    """Partial category; fields the storage requires cannot be cleared"""
    name: Optional[str] = Field(default=None, min_length=1)
    icon: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[int] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None

    @field_validator("name", "is_active", "sort_order")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    icon: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[int] = None
    product_count: int
    is_active: bool
    sort_order: int
    created_by: Optional[int] = None
    created_at: datetime


class CategoryTreeResponse(CategoryResponse):
    subcategories: List[CategoryResponse] = []


class ProductUpdateDto(BaseModel):
    """Partial product; only the fields sent are applied"""
    name: Optional[str] = Field(default=None, min_length=1)
    category_id: Optional[int] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    min_price: Optional[float] = Field(default=None, ge=0)
    max_price: Optional[float] = Field(default=None, ge=0)
    min_order: Optional[int] = Field(default=None, ge=0)
    unit: Optional[str] = None
    images: Optional[List[str]] = None
    video_url: Optional[str] = None
    specifications: Optional[str] = None
    materials: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    weight: Optional[str] = None
    dimensions: Optional[str] = None
    shipping_terms: Optional[str] = None
    incoterms: Optional[str] = None
    packaging_details: Optional[str] = None
    lead_time: Optional[str] = None
    payment_terms: Optional[str] = None
    certifications: Optional[List[str]] = None
    quality_grade: Optional[str] = None
    origin: Optional[str] = None
    supply_capacity: Optional[str] = None
    moq: Optional[str] = None
    source_url: Optional[str] = None

    @field_validator("name", "images", "certifications")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class ProductCreateDto(ProductUpdateDto):
    name: str = Field(min_length=1)


class ProductResponse(ProductUpdateDto):
    model_config = ConfigDict(from_attributes=True)

    id: int
    supplier_id: int
    name: str
    images: List[str] = []
    certifications: List[str] = []
    status: ProductStatus
    views: int
    inquiries: int
    rating: float
    reviewed_by: Optional[int] = None
    reviewed_at: Optional[datetime] = None
    review_notes: Optional[str] = None
    rejected_by: Optional[int] = None
    rejected_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    suspended_by: Optional[int] = None
    suspended_at: Optional[datetime] = None
    suspension_reason: Optional[str] = None
    restored_by: Optional[int] = None
    restored_at: Optional[datetime] = None
    deleted_by: Optional[int] = None
    deleted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    available_actions: List[str] = []


class ProductAdminResponse(ProductResponse):
    supplier_name: Optional[str] = None
    category_name: Optional[str] = None


class ProductFilters(BaseModel):
    """Public listing filters"""
    category_id: Optional[int] = None
    supplier_id: Optional[int] = None
    search: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    sort_by: ProductSort = ProductSort.NEWEST


class ReviewDto(BaseModel):
    notes: Optional[str] = None
