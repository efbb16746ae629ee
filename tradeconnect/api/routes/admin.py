"""Admin routes: stats, notifications, categories and the user approval queue"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...api.dependencies import get_current_admin_user, get_dispatcher, get_unit_of_work, to_http_exception
from ...application.dtos.auth_dtos import MessageResponse, UserDto
from ...application.dtos.catalog_dtos import CategoryCreateDto, CategoryResponse, CategoryUpdateDto
from ...application.dtos.notification_dtos import AdminNotificationCounts, AdminNotificationResponse
from ...application.dtos.stats_dtos import AdminStatsResponse
from ...application.event_dispatcher import EventDispatcher
from ...application.use_cases.auth_use_cases import UserApprovalUseCase
from ...application.use_cases.category_use_cases import CategoryUseCase
from ...application.use_cases.notification_use_cases import AdminNotificationUseCase
from ...application.use_cases.stats_use_cases import DashboardStatsUseCase
from ...domain.entities.user import User
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/stats", response_model=AdminStatsResponse)
async def get_admin_stats(
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Marketplace overview for the admin dashboard"""
    return await DashboardStatsUseCase(unit_of_work).admin_stats()


@router.get("/notifications", response_model=List[AdminNotificationResponse])
async def list_admin_notifications(
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    return await AdminNotificationUseCase(unit_of_work).list_notifications()


@router.get("/notification-counts", response_model=AdminNotificationCounts)
async def get_notification_counts(
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Unread counts for the admin sidebar badges"""
    return await AdminNotificationUseCase(unit_of_work).counts()


@router.post("/notifications/{notification_id}/read", response_model=AdminNotificationResponse)
async def mark_admin_notification_read(
    notification_id: int,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await AdminNotificationUseCase(unit_of_work).mark_read(notification_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


# Categories

@router.get("/categories", response_model=List[CategoryResponse])
async def list_all_categories(
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Every category, inactive ones included"""
    return await CategoryUseCase(unit_of_work).list_all()


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreateDto,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await CategoryUseCase(unit_of_work).create(category_data, admin_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.put("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    category_data: CategoryUpdateDto,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await CategoryUseCase(unit_of_work).update(category_id, category_data)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.delete("/categories/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: int,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        deleted = await CategoryUseCase(unit_of_work).delete(category_id)
    except MarketplaceError as e:
        raise to_http_exception(e)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete a category that has subcategories"
        )
    return MessageResponse(message="Category deleted")


# User approval queue

@router.get("/users/pending", response_model=List[UserDto])
async def list_pending_users(
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    return await UserApprovalUseCase(unit_of_work, dispatcher).list_pending()


@router.post("/users/{user_id}/approve", response_model=UserDto)
async def approve_user(
    user_id: int,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    try:
        return await UserApprovalUseCase(unit_of_work, dispatcher).approve(user_id, admin_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/users/{user_id}/reject", response_model=MessageResponse)
async def reject_user(
    user_id: int,
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    """Reject a registration, removing the account and everything it owns"""
    try:
        await UserApprovalUseCase(unit_of_work, dispatcher).reject(user_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
    return MessageResponse(message="User rejected and removed")
