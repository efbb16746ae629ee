"""Buyer inquiries: creation, replies and the supplier inbox"""

import logging
from typing import Callable, Dict, List, Optional

from ...domain.entities.inquiry import Inquiry
from ...domain.enums import BuyerStatus, InquiryApprovalStatus, InquiryStatus
from ...domain.exceptions import DomainValidationError, PermissionDeniedError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.inquiry_dtos import (
    EnrichedInquiryResponse,
    InquiryCreateDto,
    InquiryResponse,
)
from ..event_dispatcher import EventDispatcher
from .common import buyer_for_user, get_or_raise, supplier_for_user, visible_product_or_raise

logger = logging.getLogger(__name__)

# Supplier inbox ordering
STATUS_ORDER = {
    InquiryStatus.PENDING: 0,
    InquiryStatus.REPLIED: 1,
    InquiryStatus.DELETED: 2,
}


class InquiryEnricher:
    """Joins display names into inquiries, memoizing lookups per request."""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work
        self._buyers: Dict[int, tuple] = {}
        self._suppliers: Dict[int, str] = {}
        self._products: Dict[int, str] = {}

    async def _buyer(self, buyer_id: int) -> tuple:
        if buyer_id not in self._buyers:
            name, email = "Unknown Buyer", "Unknown Email"
            buyer = await self.unit_of_work.buyers.get_by_id(buyer_id)
            if buyer is not None:
                name = buyer.company_name
                user = await self.unit_of_work.users.get_by_id(buyer.user_id)
                if user is not None:
                    email = user.email
            self._buyers[buyer_id] = (name, email)
        return self._buyers[buyer_id]

    async def _supplier(self, supplier_id: int) -> str:
        if supplier_id not in self._suppliers:
            supplier = await self.unit_of_work.suppliers.get_by_id(supplier_id)
            self._suppliers[supplier_id] = supplier.company_name if supplier else "Unknown Supplier"
        return self._suppliers[supplier_id]

    async def _product(self, product_id: Optional[int]) -> str:
        if product_id is None:
            return "General Inquiry"
        if product_id not in self._products:
            product = await self.unit_of_work.products.get_by_id(product_id)
            self._products[product_id] = product.name if product else "Unknown Product"
        return self._products[product_id]

    async def enrich(self, inquiry: Inquiry) -> EnrichedInquiryResponse:
        buyer_name, buyer_email = await self._buyer(inquiry.buyer_id)
        return EnrichedInquiryResponse.model_validate({
            **InquiryResponse.model_validate(inquiry).model_dump(),
            "buyer_name": buyer_name,
            "buyer_email": buyer_email,
            "supplier_name": await self._supplier(inquiry.supplier_id),
            "product_name": await self._product(inquiry.product_id),
        })

    async def enrich_all(self, inquiries: List[Inquiry]) -> List[EnrichedInquiryResponse]:
        return [await self.enrich(inquiry) for inquiry in inquiries]


def newest_first(inquiries: List[Inquiry]) -> List[Inquiry]:
    return sorted(inquiries, key=lambda i: (i.created_at, i.id), reverse=True)


class InquiryUseCase:
    """Buyer and supplier side of an inquiry"""

    def __init__(self, unit_of_work: IUnitOfWork, dispatcher: EventDispatcher):
        self.unit_of_work = unit_of_work
        self.dispatcher = dispatcher

    async def create(self, user_id: int, request: InquiryCreateDto) -> InquiryResponse:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            if buyer.status != BuyerStatus.ACTIVE:
                raise PermissionDeniedError("Suspended buyers cannot send inquiries")

            supplier = await get_or_raise(self.unit_of_work.suppliers, request.supplier_id, "Supplier")
            if supplier.hides_products:
                raise DomainValidationError("This supplier is not accepting inquiries")

            product = None
            if request.product_id is not None:
                product = await visible_product_or_raise(self.unit_of_work, request.product_id)
                if product.supplier_id != supplier.id:
                    raise DomainValidationError("Product does not belong to this supplier")

            inquiry = Inquiry(
                buyer_id=buyer.id,
                supplier_id=supplier.id,
                product_id=request.product_id,
                subject=request.subject,
                message=request.message,
                quantity=request.quantity,
            )
            inquiry = await self.unit_of_work.inquiries.add(inquiry)
            inquiry.record_creation()

            if product is not None:
                product.increment_inquiries()
                await self.unit_of_work.products.update(product)

            await self.unit_of_work.commit()

        logger.info("Buyer %s sent inquiry %s to supplier %s", buyer.id, inquiry.id, supplier.id)
        await self.dispatcher.dispatch(inquiry.get_events())
        return InquiryResponse.model_validate(inquiry)

    async def list_for_buyer(self, user_id: int) -> List[EnrichedInquiryResponse]:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            inquiries = await self.unit_of_work.inquiries.list_by(buyer_id=buyer.id)
            return await InquiryEnricher(self.unit_of_work).enrich_all(newest_first(inquiries))

    async def list_for_supplier(self, user_id: int) -> List[EnrichedInquiryResponse]:
        """Approved inquiries only: pending first, then replied, then deleted"""
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
            inquiries = await self.unit_of_work.inquiries.list_by(
                supplier_id=supplier.id,
                admin_approval_status=InquiryApprovalStatus.APPROVED,
            )
            ordered = sorted(newest_first(inquiries), key=lambda i: STATUS_ORDER[i.status])
            return await InquiryEnricher(self.unit_of_work).enrich_all(ordered)

    async def _as_supplier(self, user_id: int, inquiry_id: int,
                           action: Callable[[Inquiry], None]) -> InquiryResponse:
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
            inquiry = await get_or_raise(self.unit_of_work.inquiries, inquiry_id, "Inquiry")
            if inquiry.supplier_id != supplier.id:
                raise PermissionDeniedError("This inquiry was not sent to you")
            action(inquiry)
            await self.unit_of_work.inquiries.update(inquiry)
            await self.unit_of_work.commit()
        return InquiryResponse.model_validate(inquiry)

    async def reply_as_supplier(self, user_id: int, inquiry_id: int, text: str) -> InquiryResponse:
        return await self._as_supplier(user_id, inquiry_id, lambda i: i.reply_as_supplier(text))

    async def delete(self, user_id: int, inquiry_id: int) -> InquiryResponse:
        return await self._as_supplier(user_id, inquiry_id, lambda i: i.delete())

    async def recover(self, user_id: int, inquiry_id: int) -> InquiryResponse:
        return await self._as_supplier(user_id, inquiry_id, lambda i: i.recover())

    async def reply_as_buyer(self, user_id: int, inquiry_id: int, text: str) -> InquiryResponse:
        async with self.unit_of_work:
            buyer = await buyer_for_user(self.unit_of_work, user_id)
            inquiry = await get_or_raise(self.unit_of_work.inquiries, inquiry_id, "Inquiry")
            if inquiry.buyer_id != buyer.id:
                raise PermissionDeniedError("This inquiry is not yours")
            inquiry.reply_as_buyer(text)
            await self.unit_of_work.inquiries.update(inquiry)
            await self.unit_of_work.commit()
        return InquiryResponse.model_validate(inquiry)
