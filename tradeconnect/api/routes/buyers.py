"""Buyer self-service routes"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_buyer_user, get_unit_of_work, to_http_exception
from ...application.dtos.profile_dtos import BuyerProfileUpdateDto, BuyerResponse
from ...application.use_cases.buyer_use_cases import BuyerProfileUseCase
from ...domain.entities.user import User
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/me/profile", response_model=BuyerResponse)
async def get_my_profile(
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await BuyerProfileUseCase(unit_of_work).get_profile(current_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.put("/me", response_model=BuyerResponse)
async def update_my_profile(
    profile_data: BuyerProfileUpdateDto,
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await BuyerProfileUseCase(unit_of_work).update_profile(current_user.id, profile_data)
    except MarketplaceError as e:
        raise to_http_exception(e)
