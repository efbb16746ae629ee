"""Admin inquiry moderation routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_admin_user, get_dispatcher, get_unit_of_work, to_http_exception
from ...application.dtos.inquiry_dtos import (
    EnrichedInquiryResponse,
    InquiryRejectDto,
    InquiryResponse,
    InquiryStatsResponse,
)
from ...application.event_dispatcher import EventDispatcher
from ...application.use_cases.inquiry_moderation import InquiryModerationUseCase
from ...domain.entities.user import User
from ...domain.enums import InquiryApprovalStatus
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


def _use_case(
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
) -> InquiryModerationUseCase:
    return InquiryModerationUseCase(unit_of_work, dispatcher)


@router.get("/pending", response_model=List[EnrichedInquiryResponse])
async def list_pending_inquiries(
    admin_user: User = Depends(get_current_admin_user),
    use_case: InquiryModerationUseCase = Depends(_use_case),
):
    return await use_case.list_inquiries(InquiryApprovalStatus.PENDING)


@router.get("/approved", response_model=List[EnrichedInquiryResponse])
async def list_approved_inquiries(
    admin_user: User = Depends(get_current_admin_user),
    use_case: InquiryModerationUseCase = Depends(_use_case),
):
    return await use_case.list_inquiries(InquiryApprovalStatus.APPROVED)


@router.get("/rejected", response_model=List[EnrichedInquiryResponse])
async def list_rejected_inquiries(
    admin_user: User = Depends(get_current_admin_user),
    use_case: InquiryModerationUseCase = Depends(_use_case),
):
    return await use_case.list_inquiries(InquiryApprovalStatus.REJECTED)


@router.get("/all", response_model=List[EnrichedInquiryResponse])
async def list_all_inquiries(
    admin_user: User = Depends(get_current_admin_user),
    use_case: InquiryModerationUseCase = Depends(_use_case),
):
    return await use_case.list_inquiries()


@router.get("/stats", response_model=InquiryStatsResponse)
async def get_inquiry_stats(
    admin_user: User = Depends(get_current_admin_user),
    use_case: InquiryModerationUseCase = Depends(_use_case),
):
    return await use_case.stats()


@router.get("/{inquiry_id}", response_model=EnrichedInquiryResponse)
async def get_inquiry(
    inquiry_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: InquiryModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.get_inquiry(inquiry_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{inquiry_id}/approve", response_model=InquiryResponse)
async def approve_inquiry(
    inquiry_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: InquiryModerationUseCase = Depends(_use_case),
):
    """Forward the inquiry to the supplier"""
    try:
        return await use_case.approve(inquiry_id, admin_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{inquiry_id}/reject", response_model=InquiryResponse)
async def reject_inquiry(
    inquiry_id: int,
    rejection: Optional[InquiryRejectDto] = None,
    admin_user: User = Depends(get_current_admin_user),
    use_case: InquiryModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.reject(inquiry_id, (rejection or InquiryRejectDto()).reason)
    except MarketplaceError as e:
        raise to_http_exception(e)
