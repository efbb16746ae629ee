"""Buyer profile self-service and admin moderation"""

import logging
from typing import List

from ...domain.entities.buyer import BuyerProfile
from ...domain.exceptions import DomainValidationError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..cascade import cascade_delete
from ..dtos.profile_dtos import BuyerAdminResponse, BuyerProfileUpdateDto, BuyerResponse
from .common import buyer_for_user, get_or_raise

logger = logging.getLogger(__name__)


class BuyerProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def get_profile(self, user_id: int) -> BuyerResponse:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
        return BuyerResponse.model_validate(buyer)

    async def update_profile(self, user_id: int, request: BuyerProfileUpdateDto) -> BuyerResponse:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            buyer.update_details(request.model_dump(exclude_unset=True))
            await self.unit_of_work.buyers.update(buyer)
            await self.unit_of_work.commit()
        return BuyerResponse.model_validate(buyer)


class BuyerModerationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def _admin_view(self, buyer: BuyerProfile) -> BuyerAdminResponse:
        user = await self.unit_of_work.users.get_by_id(buyer.user_id)
        return BuyerAdminResponse.model_validate(buyer).model_copy(update={
            "inquiry_count": await self.unit_of_work.inquiries.count_by(buyer_id=buyer.id),
            "saved_product_count": await self.unit_of_work.saved_products.count_by(buyer_id=buyer.id),
            "user_email": user.email if user else None,
        })

    async def list_buyers(self) -> List[BuyerAdminResponse]:
        async with self.unit_of_work:
            buyers = await self.unit_of_work.buyers.list_all()
            return [await self._admin_view(b) for b in buyers]

    async def get_buyer(self, buyer_id: int) -> BuyerAdminResponse:
        async with self.unit_of_work:
            buyer = await get_or_raise(self.unit_of_work.buyers, buyer_id, "Buyer")
            return await self._admin_view(buyer)

    async def suspend(self, buyer_id: int, reason: str) -> BuyerResponse:
        if not reason or not reason.strip():
            raise DomainValidationError("Suspension reason is required")
        async with self.unit_of_work:
            buyer = await get_or_raise(self.unit_of_work.buyers, buyer_id, "Buyer")
            buyer.suspend(reason)
            await self.unit_of_work.buyers.update(buyer)
            await self.unit_of_work.commit()

        logger.info("Buyer %s suspended", buyer_id)
        return BuyerResponse.model_validate(buyer)

    async def activate(self, buyer_id: int) -> BuyerResponse:
        async with self.unit_of_work:
            buyer = await get_or_raise(self.unit_of_work.buyers, buyer_id, "Buyer")
            buyer.activate()
            await self.unit_of_work.buyers.update(buyer)
            await self.unit_of_work.commit()

        logger.info("Buyer %s activated", buyer_id)
        return BuyerResponse.model_validate(buyer)

    async def delete(self, buyer_id: int) -> int:
        """Hard delete the buyer's account along with everything it owns"""
        async with self.unit_of_work:
            buyer = await get_or_raise(self.unit_of_work.buyers, buyer_id, "Buyer")
            removed = await cascade_delete(self.unit_of_work, "users", buyer.user_id)
            await self.unit_of_work.commit()

        logger.info("Buyer %s deleted, %d record(s) removed", buyer_id, removed)
        return removed
