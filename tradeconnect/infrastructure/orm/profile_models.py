"""Supplier and buyer profile ORM models"""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import BuyerStatus, SupplierStatus
from .types import enum_column_type


class SupplierProfileModel(Base):
    __tablename__ = 'supplier_profiles'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), unique=True, nullable=False, index=True)
    company_name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    website = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    profile_image = Column(String, nullable=True)
    verified = Column(Boolean, default=False, nullable=False)
    rating = Column(Float, default=0.0, nullable=False)
    status = Column(
        enum_column_type(SupplierStatus),
        default=SupplierStatus.PENDING_APPROVAL,
        nullable=False,
        index=True,
    )

    business_registration_number = Column(String, nullable=True)
    country_of_registration = Column(String, nullable=True)
    city_of_registration = Column(String, nullable=True)
    year_established = Column(Integer, nullable=True)
    legal_entity_type = Column(String, nullable=True)
    vat_tax_id = Column(String, nullable=True)
    registered_business_address = Column(Text, nullable=True)

    primary_contact_name = Column(String, nullable=True)
    contact_job_title = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)
    company_website = Column(String, nullable=True)
    whatsapp_number = Column(String, nullable=True)
    social_media_linkedin = Column(String, nullable=True)
    social_media_youtube = Column(String, nullable=True)
    social_media_facebook = Column(String, nullable=True)
    social_media_tiktok = Column(String, nullable=True)
    social_media_instagram = Column(String, nullable=True)
    social_media_pinterest = Column(String, nullable=True)
    social_media_x = Column(String, nullable=True)

    main_product_category = Column(String, nullable=True)

    business_license = Column(String, nullable=True)
    tax_certificate = Column(String, nullable=True)
    export_license = Column(String, nullable=True)
    quality_certifications = Column(JSON, default=list, nullable=False)
    factory_photos = Column(JSON, default=list, nullable=False)

    shipping_methods = Column(JSON, default=list, nullable=False)
    incoterms_supported = Column(JSON, default=list, nullable=False)
    regions_shipped_to = Column(JSON, default=list, nullable=False)
    key_clients = Column(JSON, default=list, nullable=False)
    testimonials = Column(JSON, default=list, nullable=False)

    onboarding_completed = Column(Boolean, default=False, nullable=False)
    onboarding_step = Column(Integer, default=1, nullable=False)
    profile_draft_data = Column(Text, nullable=True)
    agrees_to_terms = Column(Boolean, default=False, nullable=False)
    agrees_to_privacy = Column(Boolean, default=False, nullable=False)
    declares_info_accurate = Column(Boolean, default=False, nullable=False)

    rejected_by = Column(Integer, nullable=True)
    rejected_at = Column(DateTime, nullable=True)
    rejection_reason = Column(Text, nullable=True)
    suspended_by = Column(Integer, nullable=True)
    suspended_at = Column(DateTime, nullable=True)
    suspension_reason = Column(Text, nullable=True)
    deleted_by = Column(Integer, nullable=True)
    deleted_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, server_default=func.now())


class BuyerProfileModel(Base):
    __tablename__ = 'buyer_profiles'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), unique=True, nullable=False, index=True)
    company_name = Column(String, nullable=False)
    contact_name = Column(String, nullable=True)
    industry = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    website = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    profile_image = Column(String, nullable=True)
    status = Column(enum_column_type(BuyerStatus), default=BuyerStatus.ACTIVE, nullable=False)
    suspension_reason = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
