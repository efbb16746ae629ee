"""Product routes: public catalog and supplier product management"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...api.dependencies import (
    get_current_supplier_user,
    get_dispatcher,
    get_unit_of_work,
    to_http_exception,
)
from ...application.dtos.catalog_dtos import (
    ProductCreateDto,
    ProductFilters,
    ProductResponse,
    ProductUpdateDto,
)
from ...application.event_dispatcher import EventDispatcher
from ...application.use_cases.product_use_cases import PublicCatalogUseCase, SupplierProductUseCase
from ...domain.entities.user import User
from ...domain.enums import ProductSort, ProductStatus
from ...domain.exceptions import MarketplaceError
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/", response_model=List[ProductResponse])
async def list_products(
    category_id: Optional[int] = Query(None),
    supplier_id: Optional[int] = Query(None),
    search: Optional[str] = Query(None),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    sort_by: ProductSort = Query(ProductSort.NEWEST),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Browse approved products"""
    filters = ProductFilters(
        category_id=category_id,
        supplier_id=supplier_id,
        search=search,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
    )
    return await PublicCatalogUseCase(unit_of_work).list_products(filters)


@router.get("/mine", response_model=List[ProductResponse])
async def list_my_products(
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    """All of the caller's products except deleted ones"""
    try:
        return await SupplierProductUseCase(unit_of_work, dispatcher).list_products(current_user.id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.get("/drafts", response_model=List[ProductResponse])
async def list_drafts(
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    use_case = SupplierProductUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.list_by_status(current_user.id, ProductStatus.DRAFT)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.get("/deleted", response_model=List[ProductResponse])
async def list_deleted(
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    use_case = SupplierProductUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.list_by_status(current_user.id, ProductStatus.DELETED)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Public product page"""
    try:
        return await PublicCatalogUseCase(unit_of_work).get_product(product_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreateDto,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    """Create a product and submit it for review"""
    use_case = SupplierProductUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.create(current_user.id, product_data)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/draft", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_draft(
    product_data: ProductCreateDto,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    use_case = SupplierProductUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.create(current_user.id, product_data, as_draft=True)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/draft/{product_id}/publish", response_model=ProductResponse)
async def publish_draft(
    product_id: int,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    use_case = SupplierProductUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.publish(current_user.id, product_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_data: ProductUpdateDto,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    """Edit a product; reviewed products go back to pending"""
    use_case = SupplierProductUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.edit(current_user.id, product_id, product_data)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.delete("/{product_id}", response_model=ProductResponse)
async def delete_product(
    product_id: int,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    """Soft delete; the product can be recovered"""
    use_case = SupplierProductUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.soft_delete(current_user.id, product_id)
    except MarketplaceError as e:
        raise to_http_exception(e)


@router.post("/{product_id}/recover", response_model=ProductResponse)
async def recover_product(
    product_id: int,
    current_user: User = Depends(get_current_supplier_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    use_case = SupplierProductUseCase(unit_of_work, dispatcher)
    try:
        return await use_case.recover(current_user.id, product_id)
    except MarketplaceError as e:
        raise to_http_exception(e)
