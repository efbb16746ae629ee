"""Admin product review routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_admin_user, get_dispatcher, get_unit_of_work, to_http_exception
from ...application.dtos.auth_dtos import MessageResponse
from ...application.dtos.catalog_dtos import ProductAdminResponse, ProductResponse, ReviewDto
from ...application.dtos.profile_dtos import ReasonDto, RejectionDto
from ...application.event_dispatcher import EventDispatcher
from ...application.use_cases.product_moderation import ProductModerationUseCase
from ...domain.entities.user import User
from ...domain.enums import ProductStatus
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


def _use_case(
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
) -> ProductModerationUseCase:
    return ProductModerationUseCase(unit_of_work, dispatcher)


@router.get("/all", response_model=List[ProductAdminResponse])
async def list_all_products(
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    return await use_case.list_products()


@router.get("/pending", response_model=List[ProductAdminResponse])
async def list_pending_products(
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    """Review queue"""
    return await use_case.list_products(ProductStatus.PENDING)


@router.get("/approved", response_model=List[ProductAdminResponse])
async def list_approved_products(
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    return await use_case.list_products(ProductStatus.APPROVED)


@router.get("/rejected", response_model=List[ProductAdminResponse])
async def list_rejected_products(
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    return await use_case.list_products(ProductStatus.REJECTED)


@router.get("/suspended", response_model=List[ProductAdminResponse])
async def list_suspended_products(
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    return await use_case.list_products(ProductStatus.SUSPENDED)


@router.post("/{product_id}/approve", response_model=ProductResponse)
async def approve_product(
    product_id: int,
    review: Optional[ReviewDto] = None,
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.approve(product_id, admin_user.id, review.notes if review else None)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{product_id}/reject", response_model=ProductResponse)
async def reject_product(
    product_id: int,
    rejection: Optional[RejectionDto] = None,
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    try:
        rejection = rejection or RejectionDto()
        return await use_case.reject(product_id, admin_user.id, rejection.reason, rejection.notes)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{product_id}/suspend", response_model=ProductResponse)
async def suspend_product(
    product_id: int,
    request: ReasonDto,
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.suspend(product_id, admin_user.id, request.reason)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{product_id}/unsuspend", response_model=ProductResponse)
async def unsuspend_product(
    product_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.unsuspend(product_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{product_id}/restore", response_model=ProductResponse)
async def restore_product(
    product_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    """Send a rejected product back to review"""
    try:
        return await use_case.restore(product_id, admin_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: ProductModerationUseCase = Depends(_use_case),
):
    """Hard delete, removing saved-product references as well"""
    try:
        await use_case.hard_delete(product_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
    return MessageResponse(message="Product permanently deleted")
