"""Public category routes"""

from typing import List

from fastapi import APIRouter, Depends

from ...api.dependencies import get_unit_of_work
from ...application.dtos.catalog_dtos import CategoryResponse, CategoryTreeResponse
from ...application.use_cases.category_use_cases import CategoryUseCase
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/", response_model=List[CategoryResponse])
async def list_categories(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Active categories"""
    return await CategoryUseCase(unit_of_work).list_active()


@router.get("/with-subcategories", response_model=List[CategoryTreeResponse])
async def list_category_tree(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    return await CategoryUseCase(unit_of_work).list_tree()


@router.get("/{category_id}/subcategories", response_model=List[CategoryResponse])
async def list_subcategories(category_id: int, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    return await CategoryUseCase(unit_of_work).list_subcategories(category_id)
