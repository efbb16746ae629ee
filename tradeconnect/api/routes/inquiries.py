"""Inquiry routes for buyers and suppliers"""

from typing import List

from fastapi import APIRouter, Depends, status

from ...api.dependencies import (
    get_current_buyer_user,
    get_current_supplier_user,
    get_dispatcher,
    get_unit_of_work,
    to_http_exception,
)
from ...application.dtos.inquiry_dtos import (
    EnrichedInquiryResponse,
    InquiryCreateDto,
    InquiryReplyDto,
    InquiryResponse,
)
from ...application.event_dispatcher import EventDispatcher
from ...application.use_cases.inquiry_use_cases import InquiryUseCase
from ...domain.entities.user import User
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.post("/", response_model=InquiryResponse, status_code=status.HTTP_201_CREATED)
async def create_inquiry(
    inquiry_data: InquiryCreateDto,
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    """Send an inquiry; it reaches the supplier once an admin approves it"""
    try:
        return await InquiryUseCase(unit_of_work, dispatcher).create(current_user.id, inquiry_data)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.get("/buyer", response_model=List[EnrichedInquiryResponse])
async def list_buyer_inquiries(
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    try:
        return await InquiryUseCase(unit_of_work, dispatcher).list_for_buyer(current_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.get("/supplier", response_model=List[EnrichedInquiryResponse])
async def list_supplier_inquiries(
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    try:
        return await InquiryUseCase(unit_of_work, dispatcher).list_for_supplier(current_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{inquiry_id}/reply", response_model=InquiryResponse)
async def reply_as_supplier(
    inquiry_id: int,
    reply: InquiryReplyDto,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    use_case = InquiryUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.reply_as_supplier(current_user.id, inquiry_id, reply.reply)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{inquiry_id}/buyer-reply", response_model=InquiryResponse)
async def reply_as_buyer(
    inquiry_id: int,
    reply: InquiryReplyDto,
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    use_case = InquiryUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.reply_as_buyer(current_user.id, inquiry_id, reply.reply)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.delete("/{inquiry_id}", response_model=InquiryResponse)
async def delete_inquiry(
    inquiry_id: int,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    """Move an inquiry to the supplier's trash"""
    try:
        return await InquiryUseCase(unit_of_work, dispatcher).delete(current_user.id, inquiry_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{inquiry_id}/recover", response_model=InquiryResponse)
async def recover_inquiry(
    inquiry_id: int,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    try:
        return await InquiryUseCase(unit_of_work, dispatcher).recover(current_user.id, inquiry_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
