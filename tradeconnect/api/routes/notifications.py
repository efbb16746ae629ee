"""Notification inbox of the calling user"""

from typing import List

from fastapi import APIRouter, Depends, status

from ...api.dependencies import get_current_user, get_unit_of_work, to_http_exception
from ...application.dtos.notification_dtos import MessageCount, NotificationResponse, UnreadCountResponse
from ...application.use_cases.notification_use_cases import NotificationUseCase
from ...domain.entities.user import User
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/", response_model=List[NotificationResponse])
async def list_notifications(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Newest first"""
    return await NotificationUseCase(unit_of_work).list_for_user(current_user.id)


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    return await NotificationUseCase(unit_of_work).unread_count(current_user.id)


@router.post("/read-all", response_model=MessageCount)
async def mark_all_read(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    return await NotificationUseCase(unit_of_work).mark_all_read(current_user.id)


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await NotificationUseCase(unit_of_work).mark_read(current_user.id, notification_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        await NotificationUseCase(unit_of_work).delete(current_user.id, notification_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
