"""
Domain Enums - Business domain enumerations
"""

from enum import Enum


class UserRole(str, Enum):
    BUYER = "buyer"
    SUPPLIER = "supplier"
    ADMIN = "admin"


class SupplierStatus(str, Enum):
    ACTIVE = "active"
    PENDING_APPROVAL = "pending_approval"
    REJECTED = "rejected"
    SUSPENDED = "suspended"
    DELETED = "deleted"


class BuyerStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class ProductStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SUSPENDED = "suspended"
    DELETED = "deleted"


class InquiryStatus(str, Enum):
    PENDING = "pending"
    REPLIED = "replied"
    DELETED = "deleted"


class InquiryApprovalStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotificationType(str, Enum):
    USER_APPROVED = "user_approved"
    PROFILE_APPROVED = "profile_approved"
    PROFILE_REJECTED = "profile_rejected"
    PROFILE_SUSPENDED = "profile_suspended"
    PROFILE_REACTIVATED = "profile_reactivated"
    PROFILE_RESTORED = "profile_restored"
    PROFILE_DELETED = "profile_deleted"
    PRODUCT_APPROVED = "product_approved"
    PRODUCT_REJECTED = "product_rejected"
    PRODUCT_SUSPENDED = "product_suspended"
    PRODUCT_REACTIVATED = "product_reactivated"
    PRODUCT_RESTORED = "product_restored"
    INQUIRY_RECEIVED = "inquiry_received"
    INQUIRY_REJECTED = "inquiry_rejected"


class AdminNotificationType(str, Enum):
    NEW_USER_REGISTRATION = "new_user_registration"
    NEW_SUPPLIER = "new_supplier"
    NEW_BUYER = "new_buyer"
    NEW_PRODUCT = "new_product"
    NEW_INQUIRY = "new_inquiry"


class ProductSort(str, Enum):
    NEWEST = "newest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    RATING = "rating"
