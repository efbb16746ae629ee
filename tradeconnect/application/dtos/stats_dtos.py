"""Dashboard statistics DTOs"""

from pydantic import BaseModel


class SupplierStatsResponse(BaseModel):
    total_products: int
    active_inquiries: int
    profile_views: int
    rating: float


class BuyerStatsResponse(BaseModel):
    saved_products: int
    active_inquiries: int
    following_suppliers: int
    successful_orders: int = 0


class AdminStatsResponse(BaseModel):
    total_suppliers: int
    verified_suppliers: int
    rejected_suppliers: int
    total_buyers: int
    total_products: int
    approved_products: int
    pending_products: int
    suspended_products: int
    rejected_products: int
    pending_user_approvals: int
