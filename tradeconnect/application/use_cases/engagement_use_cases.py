"""Saved products and followed suppliers"""

import logging
from typing import List

from ...domain.entities.engagement import FollowedSupplier, SavedProduct
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.catalog_dtos import ProductResponse
from ..dtos.engagement_dtos import FollowedSupplierResponse, SavedProductResponse
from ..dtos.profile_dtos import SupplierResponse
from .common import buyer_for_user, get_or_raise, is_publicly_visible, visible_product_or_raise

logger = logging.getLogger(__name__)


class EngagementUseCase:
    """Buyer bookmarks. Saving or following twice returns the existing record."""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def _saved_view(self, saved: SavedProduct) -> SavedProductResponse:
        product = await self.unit_of_work.products.get_by_id(saved.product_id)
        response = SavedProductResponse.model_validate(saved)
        if product is not None and await is_publicly_visible(self.unit_of_work, product):
            response.product = ProductResponse.model_validate(product)
        return response

    async def _followed_view(self, followed: FollowedSupplier) -> FollowedSupplierResponse:
        supplier = await self.unit_of_work.suppliers.get_by_id(followed.supplier_id)
        response = FollowedSupplierResponse.model_validate(followed)
        if supplier is not None:
            response.supplier = SupplierResponse.model_validate(supplier)
        return response

    async def save_product(self, user_id: int, product_id: int) -> SavedProductResponse:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            await visible_product_or_raise(self.unit_of_work, product_id)

            existing = await self.unit_of_work.saved_products.list_by(buyer_id=buyer.id, product_id=product_id)
            if existing:
                return await self._saved_view(existing[0])

            saved = await self.unit_of_work.saved_products.add(
                SavedProduct(buyer_id=buyer.id, product_id=product_id)
            )
            await self.unit_of_work.commit()
            logger.info("Buyer %s saved product %s", buyer.id, product_id)
            return await self._saved_view(saved)

    async def list_saved_products(self, user_id: int) -> List[SavedProductResponse]:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            saved = await self.unit_of_work.saved_products.list_by(buyer_id=buyer.id)
            return [await self._saved_view(s) for s in saved]

    async def unsave_product(self, user_id: int, product_id: int) -> bool:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            existing = await self.unit_of_work.saved_products.list_by(buyer_id=buyer.id, product_id=product_id)
            for saved in existing:
                await self.unit_of_work.saved_products.delete(saved.id)
            await self.unit_of_work.commit()
            return bool(existing)

    async def follow_supplier(self, user_id: int, supplier_id: int) -> FollowedSupplierResponse:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            await get_or_raise(self.unit_of_work.suppliers, supplier_id, "Supplier")

            existing = await self.unit_of_work.followed_suppliers.list_by(buyer_id=buyer.id, supplier_id=supplier_id)
            if existing:
                return await self._followed_view(existing[0])

            followed = await self.unit_of_work.followed_suppliers.add(
                FollowedSupplier(buyer_id=buyer.id, supplier_id=supplier_id)
            )
            await self.unit_of_work.commit()
            logger.info("Buyer %s followed supplier %s", buyer.id, supplier_id)
            return await self._followed_view(followed)

    async def list_followed_suppliers(self, user_id: int) -> List[FollowedSupplierResponse]:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            followed = await self.unit_of_work.followed_suppliers.list_by(buyer_id=buyer.id)
            return [await self._followed_view(f) for f in followed]

    async def unfollow_supplier(self, user_id: int, supplier_id: int) -> bool:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            existing = await self.unit_of_work.followed_suppliers.list_by(buyer_id=buyer.id, supplier_id=supplier_id)
            for followed in existing:
                await self.unit_of_work.followed_suppliers.delete(followed.id)
            await self.unit_of_work.commit()
            return bool(existing)
