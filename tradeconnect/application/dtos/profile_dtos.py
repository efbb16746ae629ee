"""Supplier and buyer profile DTOs"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...domain.enums import BuyerStatus, SupplierStatus


class SupplierProfileUpdateDto(BaseModel):
    """Partial supplier profile; only the fields sent are applied"""
    company_name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    profile_image: Optional[str] = None

    business_registration_number: Optional[str] = None
    country_of_registration: Optional[str] = None
    city_of_registration: Optional[str] = None
    year_established: Optional[int] = None
    legal_entity_type: Optional[str] = None
    vat_tax_id: Optional[str] = None
    registered_business_address: Optional[str] = None

    primary_contact_name: Optional[str] = None
    contact_job_title: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    company_website: Optional[str] = None
    whatsapp_number: Optional[str] = None
    social_media_linkedin: Optional[str] = None
    social_media_youtube: Optional[str] = None
    social_media_facebook: Optional[str] = None
    social_media_tiktok: Optional[str] = None
    social_media_instagram: Optional[str] = None
    social_media_pinterest: Optional[str] = None
    social_media_x: Optional[str] = None

    main_product_category: Optional[str] = None

    business_license: Optional[str] = None
    tax_certificate: Optional[str] = None
    export_license: Optional[str] = None
    quality_certifications: Optional[List[str]] = None
    factory_photos: Optional[List[str]] = None

    shipping_methods: Optional[List[str]] = None
    incoterms_supported: Optional[List[str]] = None
    regions_shipped_to: Optional[List[str]] = None
    key_clients: Optional[List[str]] = None
    testimonials: Optional[List[str]] = None

    onboarding_step: Optional[int] = None

    @field_validator(
        "company_name",
        "quality_certifications",
        "factory_photos",
        "shipping_methods",
        "incoterms_supported",
        "regions_shipped_to",
        "key_clients",
        "testimonials",
        "onboarding_step",
    )
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class OnboardingSubmissionDto(SupplierProfileUpdateDto):
    """Final onboarding step; the supplier must accept the terms"""
    company_name: str = Field(min_length=1)
    agrees_to_terms: bool
    agrees_to_privacy: bool
    declares_info_accurate: bool


class SupplierDraftDto(BaseModel):
    """Free-form onboarding draft, stored as a JSON string"""
    draft_data: Any


class SupplierResponse(SupplierProfileUpdateDto):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    company_name: str
    verified: bool
    rating: float
    status: SupplierStatus
    onboarding_completed: bool
    onboarding_step: int
    profile_draft_data: Optional[str] = None
    agrees_to_terms: bool = False
    agrees_to_privacy: bool = False
    declares_info_accurate: bool = False

    rejected_by: Optional[int] = None
    rejected_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    suspended_by: Optional[int] = None
    suspended_at: Optional[datetime] = None
    suspension_reason: Optional[str] = None
    deleted_by: Optional[int] = None
    deleted_at: Optional[datetime] = None
    created_at: datetime
    available_actions: List[str] = []


class SupplierAdminResponse(SupplierResponse):
    product_count: int = 0
    user_email: Optional[str] = None
    email_verified: Optional[bool] = None


class BuyerProfileUpdateDto(BaseModel):
    company_name: Optional[str] = Field(default=None, min_length=1)
    contact_name: Optional[str] = None
    industry: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    profile_image: Optional[str] = None

    @field_validator("company_name")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class BuyerResponse(BuyerProfileUpdateDto):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    company_name: str
    status: BuyerStatus
    suspension_reason: Optional[str] = None
    created_at: datetime


class BuyerAdminResponse(BuyerResponse):
    inquiry_count: int = 0
    saved_product_count: int = 0
    user_email: Optional[str] = None


class ReasonDto(BaseModel):
    """Suspension requires a non-empty reason"""
    reason: str = Field(min_length=1)


class RejectionDto(BaseModel):
    reason: Optional[str] = None
    notes: Optional[str] = None
