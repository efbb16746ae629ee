"""Saved products and followed suppliers"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from ...api.dependencies import get_current_buyer_user, get_unit_of_work, to_http_exception
from ...application.dtos.auth_dtos import MessageResponse
from ...application.dtos.engagement_dtos import (
    FollowedSupplierResponse,
    FollowSupplierDto,
    SavedProductResponse,
    SaveProductDto,
)
from ...application.use_cases.engagement_use_cases import EngagementUseCase
from ...domain.entities.user import User
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

saved_products_router = APIRouter()
followed_suppliers_router = APIRouter()


@saved_products_router.post("/", response_model=SavedProductResponse, status_code=status.HTTP_201_CREATED)
async def save_product(
    request: SaveProductDto,
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await EngagementUseCase(unit_of_work).save_product(current_user.id, request.product_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@saved_products_router.get("/", response_model=List[SavedProductResponse])
async def list_saved_products(
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await EngagementUseCase(unit_of_work).list_saved_products(current_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@saved_products_router.delete("/", response_model=MessageResponse)
async def unsave_product(
    product_id: int = Query(...),
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        removed = await EngagementUseCase(unit_of_work).unsave_product(current_user.id, product_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
    return MessageResponse(
        message="Product removed from saved list" if removed else "Product was not saved",
        success=removed,
    )


@followed_suppliers_router.post("/", response_model=FollowedSupplierResponse, status_code=status.HTTP_201_CREATED)
async def follow_supplier(
    request: FollowSupplierDto,
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await EngagementUseCase(unit_of_work).follow_supplier(current_user.id, request.supplier_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@followed_suppliers_router.get("/", response_model=List[FollowedSupplierResponse])
async def list_followed_suppliers(
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await EngagementUseCase(unit_of_work).list_followed_suppliers(current_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@followed_suppliers_router.delete("/", response_model=MessageResponse)
async def unfollow_supplier(
    supplier_id: int = Query(...),
    current_user: User = Depends(get_current_buyer_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        removed = await EngagementUseCase(unit_of_work).unfollow_supplier(current_user.id, supplier_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
    return MessageResponse(
        message="Supplier unfollowed" if removed else "Supplier was not followed",
        success=removed,
    )
