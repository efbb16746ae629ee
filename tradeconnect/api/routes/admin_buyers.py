"""Admin buyer moderation routes"""

from typing import List

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_admin_user, get_unit_of_work, to_http_exception
from ...application.dtos.auth_dtos import MessageResponse
from ...application.dtos.profile_dtos import BuyerAdminResponse, BuyerResponse, ReasonDto
from ...application.use_cases.buyer_use_cases import BuyerModerationUseCase
from ...domain.entities.user import User
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/", response_model=List[BuyerAdminResponse])
async def list_buyers(
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    return await BuyerModerationUseCase(unit_of_work).list_buyers()


@router.get("/{buyer_id}", response_model=BuyerAdminResponse)
async def get_buyer(
    buyer_id: int,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await BuyerModerationUseCase(unit_of_work).get_buyer(buyer_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{buyer_id}/suspend", response_model=BuyerResponse)
async def suspend_buyer(
    buyer_id: int,
    request: ReasonDto,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await BuyerModerationUseCase(unit_of_work).suspend(buyer_id, request.reason)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{buyer_id}/activate", response_model=BuyerResponse)
async def activate_buyer(
    buyer_id: int,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await BuyerModerationUseCase(unit_of_work).activate(buyer_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.delete("/{buyer_id}", response_model=MessageResponse)
async def delete_buyer(
    buyer_id: int,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Remove the buyer, its account and everything they own"""
    try:
        await BuyerModerationUseCase(unit_of_work).delete(buyer_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
    return MessageResponse(message="Buyer deleted")
