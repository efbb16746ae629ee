"""Supplier directory and supplier self-service routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...api.dependencies import get_current_supplier_user, get_unit_of_work, to_http_exception
from ...application.dtos.profile_dtos import (
    OnboardingSubmissionDto,
    SupplierDraftDto,
    SupplierProfileUpdateDto,
    SupplierResponse,
)
from ...application.use_cases.supplier_use_cases import SupplierDirectoryUseCase, SupplierProfileUseCase
from ...domain.entities.user import User
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/", response_model=List[SupplierResponse])
async def list_suppliers(
    search: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Active suppliers"""
    return await SupplierDirectoryUseCase(unit_of_work).list_suppliers(search, location)


@router.get("/me/profile", response_model=SupplierResponse)
async def get_my_profile(
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await SupplierProfileUseCase(unit_of_work).get_profile(current_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.put("/me", response_model=SupplierResponse)
async def update_my_profile(
    profile_data: SupplierProfileUpdateDto,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    try:
        return await SupplierProfileUseCase(unit_of_work).update_profile(current_user.id, profile_data)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/save-draft", response_model=SupplierResponse)
async def save_onboarding_draft(
    draft: SupplierDraftDto,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Keep the onboarding wizard state between sessions"""
    try:
        return await SupplierProfileUseCase(unit_of_work).save_draft(current_user.id, draft.draft_data)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/complete-onboarding", response_model=SupplierResponse)
async def complete_onboarding(
    submission: OnboardingSubmissionDto,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Submit the onboarding form for admin review"""
    try:
        return await SupplierProfileUseCase(unit_of_work).submit_onboarding(current_user.id, submission)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(supplier_id: int, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    try:
        return await SupplierDirectoryUseCase(unit_of_work).get_supplier(supplier_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
