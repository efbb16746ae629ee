"""Main API router"""

from fastapi import APIRouter

from .routes import (
    admin,
    admin_buyers,
    admin_inquiries,
    admin_products,
    admin_suppliers,
    auth,
    buyers,
    categories,
    dashboard,
    engagement,
    inquiries,
    notifications,
    products,
    suppliers,
)

# Main API router
api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(suppliers.router, prefix="/suppliers", tags=["suppliers"])
api_router.include_router(buyers.router, prefix="/buyers", tags=["buyers"])
api_router.include_router(inquiries.router, prefix="/inquiries", tags=["inquiries"])
api_router.include_router(engagement.saved_products_router, prefix="/saved-products", tags=["engagement"])
api_router.include_router(engagement.followed_suppliers_router, prefix="/followed-suppliers", tags=["engagement"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])

api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(admin_suppliers.router, prefix="/admin/suppliers", tags=["admin"])
api_router.include_router(admin_products.router, prefix="/admin/products", tags=["admin"])
api_router.include_router(admin_inquiries.router, prefix="/admin/inquiries", tags=["admin"])
api_router.include_router(admin_buyers.router, prefix="/admin/buyers", tags=["admin"])
