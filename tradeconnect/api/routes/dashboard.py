"""Dashboard counters for suppliers and buyers"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_buyer_user, get_current_supplier_user, get_unit_of_work, to_http_exception
from ...application.dtos.stats_dtos import BuyerStatsResponse, SupplierStatsResponse
from ...application.use_cases.stats_use_cases import DashboardStatsUseCase
from ...domain.entities.user import User
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/supplier", response_model=SupplierStatsResponse)
async def supplier_dashboard(
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await DashboardStatsUseCase(unit_of_work).supplier_stats(current_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.get("/buyer", response_model=BuyerStatsResponse)
async def buyer_dashboard(
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await DashboardStatsUseCase(unit_of_work).buyer_stats(current_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)
