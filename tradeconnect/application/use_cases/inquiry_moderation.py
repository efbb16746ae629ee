"""Admin moderation of buyer inquiries"""

import logging
from typing import Callable, List, Optional

from ...domain.entities.inquiry import Inquiry
from ...domain.enums import InquiryApprovalStatus, InquiryStatus
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.inquiry_dtos import EnrichedInquiryResponse, InquiryResponse, InquiryStatsResponse
from ..event_dispatcher import EventDispatcher
from .common import get_or_raise
from .inquiry_use_cases import InquiryEnricher, newest_first

logger = logging.getLogger(__name__)


class InquiryModerationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, dispatcher: EventDispatcher):
        self.unit_of_work = unit_of_work
        self.dispatcher = dispatcher

    async def _transition(self, inquiry_id: int, action: Callable[[Inquiry], None]) -> InquiryResponse:
        async with self.unit_of_work:
            inquiry = await get_or_raise(self.unit_of_work.inquiries, inquiry_id, "Inquiry")
            action(inquiry)
            await self.unit_of_work.inquiries.update(inquiry)
            await self.unit_of_work.commit()

        logger.info("Inquiry %s is now %s", inquiry_id, inquiry.admin_approval_status.value)
        await self.dispatcher.dispatch(inquiry.get_events())
        return InquiryResponse.model_validate(inquiry)

    async def approve(self, inquiry_id: int, admin_id: int) -> InquiryResponse:
        return await self._transition(inquiry_id, lambda i: i.approve(admin_id))

    async def reject(self, inquiry_id: int, reason: str) -> InquiryResponse:
        return await self._transition(inquiry_id, lambda i: i.reject(reason))

    async def list_inquiries(self, approval: Optional[InquiryApprovalStatus] = None) -> List[EnrichedInquiryResponse]:
        async with self.unit_of_work:
            if approval is None:
                inquiries = await self.unit_of_work.inquiries.list_all()
            else:
                inquiries = await self.unit_of_work.inquiries.list_by(admin_approval_status=approval)
            return await InquiryEnricher(self.unit_of_work).enrich_all(newest_first(inquiries))

    async def get_inquiry(self, inquiry_id: int) -> EnrichedInquiryResponse:
        async with self.unit_of_work:
            inquiry = await get_or_raise(self.unit_of_work.inquiries, inquiry_id, "Inquiry")
            return await InquiryEnricher(self.unit_of_work).enrich(inquiry)

    async def stats(self) -> InquiryStatsResponse:
        async with self.unit_of_work:
            inquiries = await self.unit_of_work.inquiries.list_all()

        def count(predicate) -> int:
            return sum(1 for i in inquiries if predicate(i))

        return InquiryStatsResponse(
            total=len(inquiries),
            pending_approval=count(lambda i: i.admin_approval_status == InquiryApprovalStatus.PENDING),
            approved=count(lambda i: i.admin_approval_status == InquiryApprovalStatus.APPROVED),
            rejected=count(lambda i: i.admin_approval_status == InquiryApprovalStatus.REJECTED),
            replied=count(lambda i: i.status == InquiryStatus.REPLIED),
            deleted=count(lambda i: i.status == InquiryStatus.DELETED),
        )
