"""Dashboard counters"""

from ...domain.enums import InquiryApprovalStatus, InquiryStatus, ProductStatus, SupplierStatus, UserRole
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.stats_dtos import AdminStatsResponse, BuyerStatsResponse, SupplierStatsResponse
from .common import buyer_for_user, supplier_for_user


class DashboardStatsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def supplier_stats(self, user_id: int) -> SupplierStatsResponse:
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
            products = [
                p for p in await self.unit_of_work.products.list_by(supplier_id=supplier.id)
                if p.status != ProductStatus.DELETED
            ]
            active_inquiries = await self.unit_of_work.inquiries.count_by(
                supplier_id=supplier.id,
                status=InquiryStatus.PENDING,
                admin_approval_status=InquiryApprovalStatus.APPROVED,
            )
            return SupplierStatsResponse(
                total_products=len(products),
                active_inquiries=active_inquiries,
                profile_views=sum(p.views for p in products),
                rating=supplier.rating,
            )

    async def buyer_stats(self, user_id: int) -> BuyerStatsResponse:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            return BuyerStatsResponse(
                saved_products=await self.unit_of_work.saved_products.count_by(buyer_id=buyer.id),
                active_inquiries=await self.unit_of_work.inquiries.count_by(
                    buyer_id=buyer.id, status=InquiryStatus.PENDING
                ),
                following_suppliers=await self.unit_of_work.followed_suppliers.count_by(buyer_id=buyer.id),
            )

    async def admin_stats(self) -> AdminStatsResponse:
        async with self.unit_of_work:
            suppliers = await self.unit_of_work.suppliers.list_all()
            products = await self.unit_of_work.products.list_all()
            pending_users = [
                u for u in await self.unit_of_work.users.list_by(approved=False)
                if u.role != UserRole.ADMIN
            ]
            total_buyers = len(await self.unit_of_work.buyers.list_all())

        def products_with(status: ProductStatus) -> int:
            return sum(1 for p in products if p.status == status)

        rejected_suppliers = sum(1 for s in suppliers if s.status == SupplierStatus.REJECTED)
        return AdminStatsResponse(
            total_suppliers=len(suppliers) - rejected_suppliers,
            verified_suppliers=sum(1 for s in suppliers if s.verified),
            rejected_suppliers=rejected_suppliers,
            total_buyers=total_buyers,
            total_products=len(products) - products_with(ProductStatus.REJECTED),
            approved_products=products_with(ProductStatus.APPROVED),
            pending_products=products_with(ProductStatus.PENDING),
            suspended_products=products_with(ProductStatus.SUSPENDED),
            rejected_products=products_with(ProductStatus.REJECTED),
            pending_user_approvals=len(pending_users),
        )
