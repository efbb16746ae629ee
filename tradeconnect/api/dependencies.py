"""API dependencies"""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from ..application.event_dispatcher import EventDispatcher
from ..core.config import Settings
from ..domain.entities.user import User
from ..domain.enums import UserRole
from ..domain.exceptions import (
    AuthenticationError,
    EntityNotFoundError,
    InvalidTransitionError,
    MarketplaceError,
    PermissionDeniedError,
)
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..infrastructure.container import Container
from ..infrastructure.external_services.email_service import EmailService

logger = logging.getLogger(__name__)


ERROR_STATUS_CODES = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
)


def to_http_exception(error: MarketplaceError) -> HTTPException:
    """Translate a domain error into the HTTP error the client sees"""
    status_code = status.HTTP_400_BAD_REQUEST
    for error_cls, code in ERROR_STATUS_CODES:
        if isinstance(error, error_cls):
            status_code = code
            break

    if isinstance(error, InvalidTransitionError):
        logger.warning("Refused transition: %s", error.message)

    if isinstance(error, AuthenticationError) and error.details:
        return HTTPException(status_code=status_code, detail={"message": error.message, **error.details})
    return HTTPException(status_code=status_code, detail=error.message)


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_settings(container: Container = Depends(get_container)) -> Settings:
    return container.config


def get_unit_of_work(container: Container = Depends(get_container)) -> IUnitOfWork:
    """Get unit of work"""
    return container.unit_of_work_factory()


def get_dispatcher(container: Container = Depends(get_container)) -> EventDispatcher:
    return container.dispatcher


def get_email_service(container: Container = Depends(get_container)) -> EmailService:
    """Get email service"""
    return container.email_service


async def get_current_user(
    user_id_header: Optional[str] = Header(default=None, alias="user-id"),
    container: Container = Depends(get_container),
) -> User:
    """Resolve the caller from the ``user-id`` header"""
    if not user_id_header or not user_id_header.strip().isdigit():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    async with container.unit_of_work_factory() as unit_of_work:
        user = await unit_of_work.users.get_by_id(int(user_id_header))

    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user


async def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """Get current admin user"""
    if current_user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return current_user


async def get_current_supplier_user(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.SUPPLIER:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Supplier access required"
        )
    return current_user


async def get_current_buyer_user(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.BUYER:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Buyer access required"
        )
    return current_user
