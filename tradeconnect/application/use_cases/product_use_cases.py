"""Supplier product management and the public catalog"""

import logging
from typing import List, Optional

from ...domain.entities.product import Product
from ...domain.entities.supplier import SupplierProfile
from ...domain.enums import ProductSort, ProductStatus, SupplierStatus
from ...domain.exceptions import DomainValidationError, PermissionDeniedError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.catalog_dtos import ProductCreateDto, ProductFilters, ProductResponse, ProductUpdateDto
from ..event_dispatcher import EventDispatcher
from .common import get_or_raise, supplier_for_user, visible_product_or_raise

logger = logging.getLogger(__name__)


class SupplierProductUseCase:
    """Products as seen and edited by their owning supplier"""

    def __init__(self, unit_of_work: IUnitOfWork, dispatcher: EventDispatcher):
        self.unit_of_work = unit_of_work
        self.dispatcher = dispatcher

    async def _active_supplier(self, user_id: int) -> SupplierProfile:
        supplier = await supplier_for_user(self.unit_of_work, user_id)
        if supplier.hides_products:
            raise PermissionDeniedError(f"Supplier account is {supplier.status.value}")
        return supplier

    async def _owned_product(self, supplier: SupplierProfile, product_id: int) -> Product:
        product = await get_or_raise(self.unit_of_work.products, product_id, "Product")
        if product.supplier_id != supplier.id:
            raise PermissionDeniedError("You can only manage your own products")
        return product

    async def create(self, user_id: int, request: ProductCreateDto, as_draft: bool = False) -> ProductResponse:
        data = request.model_dump(exclude_unset=True)
        async with self.unit_of_work:
            supplier = await self._active_supplier(user_id)

            category = None
            if request.category_id is not None:
                category = await self.unit_of_work.categories.get_by_id(request.category_id)
                if category is None:
                    raise DomainValidationError(f"Category {request.category_id} does not exist")

            product = Product.create(supplier.id, data, as_draft=as_draft)
            product = await self.unit_of_work.products.add(product)
            product.record_creation()

            # Counted on creation whatever the status, released only on hard delete
            if category is not None:
                category.increment_product_count()
                await self.unit_of_work.categories.update(category)

            await self.unit_of_work.commit()

        logger.info("Supplier %s created product %s as %s", supplier.id, product.id, product.status.value)
        await self.dispatcher.dispatch(product.get_events())
        return ProductResponse.model_validate(product)

    async def edit(self, user_id: int, product_id: int, request: ProductUpdateDto) -> ProductResponse:
        data = request.model_dump(exclude_unset=True)
        async with self.unit_of_work:
            supplier = await self._active_supplier(user_id)
            product = await self._owned_product(supplier, product_id)
            if data.get("category_id") is not None:
                if await self.unit_of_work.categories.get_by_id(data["category_id"]) is None:
                    raise DomainValidationError(f"Category {data['category_id']} does not exist")
            product.edit(data)
            await self.unit_of_work.products.update(product)
            await self.unit_of_work.commit()
        return ProductResponse.model_validate(product)

    async def publish(self, user_id: int, product_id: int) -> ProductResponse:
        async with self.unit_of_work:
            supplier = await self._active_supplier(user_id)
            product = await self._owned_product(supplier, product_id)
            product.publish()
            await self.unit_of_work.products.update(product)
            await self.unit_of_work.commit()

        await self.dispatcher.dispatch(product.get_events())
        return ProductResponse.model_validate(product)

    async def soft_delete(self, user_id: int, product_id: int) -> ProductResponse:
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
            product = await self._owned_product(supplier, product_id)
            product.soft_delete(user_id)
            await self.unit_of_work.products.update(product)
            await self.unit_of_work.commit()
        return ProductResponse.model_validate(product)

    async def recover(self, user_id: int, product_id: int) -> ProductResponse:
        async with self.unit_of_work:
            supplier = await self._active_supplier(user_id)
            product = await self._owned_product(supplier, product_id)
            product.recover()
            await self.unit_of_work.products.update(product)
            await self.unit_of_work.commit()
        return ProductResponse.model_validate(product)

    async def list_products(self, user_id: int, include_deleted: bool = False) -> List[ProductResponse]:
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
            products = await self.unit_of_work.products.list_by(supplier_id=supplier.id)
        if not include_deleted:
            products = [p for p in products if p.status != ProductStatus.DELETED]
        return [ProductResponse.model_validate(p) for p in products]

    async def list_by_status(self, user_id: int, status: ProductStatus) -> List[ProductResponse]:
        """Drafts or deleted products of the calling supplier"""
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
            products = await self.unit_of_work.products.list_by(supplier_id=supplier.id, status=status)
        return [ProductResponse.model_validate(p) for p in products]


class PublicCatalogUseCase:
    """Anonymous product browsing; only approved products of visible suppliers"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def _hidden_supplier_ids(self) -> set:
        hidden = set()
        for status in (SupplierStatus.SUSPENDED, SupplierStatus.DELETED):
            hidden.update(s.id for s in await self.unit_of_work.suppliers.list_by(status=status))
        return hidden

    async def list_products(self, filters: Optional[ProductFilters] = None) -> List[ProductResponse]:
        filters = filters or ProductFilters()
        async with self.unit_of_work:
            products = await self.unit_of_work.products.list_by(status=ProductStatus.APPROVED)
            hidden = await self._hidden_supplier_ids()

        products = [p for p in products if p.supplier_id not in hidden]

        if filters.category_id is not None:
            products = [p for p in products if p.category_id == filters.category_id]
        if filters.supplier_id is not None:
            products = [p for p in products if p.supplier_id == filters.supplier_id]
        if filters.search:
            needle = filters.search.lower()
            products = [
                p for p in products
                if needle in p.name.lower() or needle in (p.description or "").lower()
            ]
        if filters.min_price is not None:
            products = [p for p in products if p.price is not None and p.price >= filters.min_price]
        if filters.max_price is not None:
            products = [p for p in products if p.price is not None and p.price <= filters.max_price]

        if filters.sort_by == ProductSort.PRICE_ASC:
            products.sort(key=lambda p: (p.price is None, p.price or 0))
        elif filters.sort_by == ProductSort.PRICE_DESC:
            products.sort(key=lambda p: (p.price is None, -(p.price or 0)))
        elif filters.sort_by == ProductSort.RATING:
            products.sort(key=lambda p: p.rating, reverse=True)
        else:
            products.sort(key=lambda p: (p.created_at, p.id), reverse=True)

        return [ProductResponse.model_validate(p) for p in products]

    async def get_product(self, product_id: int) -> ProductResponse:
        """Public product page; counts a view"""
        async with self.unit_of_work:
            product = await visible_product_or_raise(self.unit_of_work, product_id)

            product.increment_views()
            await self.unit_of_work.products.update(product)
            await self.unit_of_work.commit()
        return ProductResponse.model_validate(product)
