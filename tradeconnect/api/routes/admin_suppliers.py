"""Admin supplier moderation routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_admin_user, get_dispatcher, get_unit_of_work, to_http_exception
from ...application.dtos.profile_dtos import ReasonDto, RejectionDto, SupplierAdminResponse, SupplierResponse
from ...application.event_dispatcher import EventDispatcher
from ...application.use_cases.supplier_moderation import SupplierModerationUseCase
from ...domain.entities.user import User
from ...domain.enums import SupplierStatus
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


def _use_case(
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
) -> SupplierModerationUseCase:
    return SupplierModerationUseCase(unit_of_work, dispatcher)


@router.get("/", response_model=List[SupplierAdminResponse])
async def list_suppliers(
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    return await use_case.list_suppliers()


@router.get("/pending", response_model=List[SupplierAdminResponse])
async def list_pending_suppliers(
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    """Suppliers that finished onboarding and wait for review"""
    return await use_case.list_pending()


@router.get("/rejected", response_model=List[SupplierAdminResponse])
async def list_rejected_suppliers(
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    return await use_case.list_suppliers(SupplierStatus.REJECTED)


@router.get("/suspended", response_model=List[SupplierAdminResponse])
async def list_suspended_suppliers(
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    return await use_case.list_suppliers(SupplierStatus.SUSPENDED)


@router.get("/deleted", response_model=List[SupplierAdminResponse])
async def list_deleted_suppliers(
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    return await use_case.list_suppliers(SupplierStatus.DELETED)


@router.get("/{supplier_id}", response_model=SupplierAdminResponse)
async def get_supplier(
    supplier_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.get_supplier(supplier_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{supplier_id}/approve", response_model=SupplierResponse)
async def approve_supplier(
    supplier_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.approve(supplier_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{supplier_id}/reject", response_model=SupplierResponse)
async def reject_supplier(
    supplier_id: int,
    rejection: Optional[RejectionDto] = None,
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.reject(supplier_id, admin_user.id, rejection.reason if rejection else None)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{supplier_id}/suspend", response_model=SupplierResponse)
async def suspend_supplier(
    supplier_id: int,
    request: ReasonDto,
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    """Suspend an active supplier; its products disappear from the catalog"""
    try:
        return await use_case.suspend(supplier_id, admin_user.id, request.reason)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{supplier_id}/activate", response_model=SupplierResponse)
async def activate_supplier(
    supplier_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.activate(supplier_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{supplier_id}/restore", response_model=SupplierResponse)
async def restore_supplier(
    supplier_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    """Send a rejected supplier back to the review queue"""
    try:
        return await use_case.restore(supplier_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.delete("/{supplier_id}", response_model=SupplierResponse)
async def delete_supplier(
    supplier_id: int,
    admin_user: User = Depends(get_current_admin_user),
    use_case: SupplierModerationUseCase = Depends(_use_case),
):
    try:
        return await use_case.delete(supplier_id, admin_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)
