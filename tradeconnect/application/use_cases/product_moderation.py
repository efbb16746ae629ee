"""Admin moderation of products"""

import logging
from typing import Callable, List, Optional

from ...domain.entities.product import Product
from ...domain.enums import ProductStatus
from ...domain.exceptions import DomainValidationError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..cascade import cascade_delete
from ..dtos.catalog_dtos import ProductAdminResponse, ProductResponse
from ..event_dispatcher import EventDispatcher
from .common import get_or_raise

logger = logging.getLogger(__name__)


class ProductModerationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, dispatcher: EventDispatcher):
        self.unit_of_work = unit_of_work
        self.dispatcher = dispatcher

    async def _transition(self, product_id: int, action: Callable[[Product], None]) -> ProductResponse:
        async with self.unit_of_work:
            product = await get_or_raise(self.unit_of_work.products, product_id, "Product")
            previous = product.status
            action(product)
            await self.unit_of_work.products.update(product)
            await self.unit_of_work.commit()

        logger.info("Product %s: %s -> %s", product_id, previous.value, product.status.value)
        await self.dispatcher.dispatch(product.get_events())
        return ProductResponse.model_validate(product)

    async def approve(self, product_id: int, admin_id: int, notes: Optional[str] = None) -> ProductResponse:
        return await self._transition(product_id, lambda p: p.approve(admin_id, notes))

    async def reject(self, product_id: int, admin_id: int, reason: Optional[str] = None,
                     notes: Optional[str] = None) -> ProductResponse:
        return await self._transition(product_id, lambda p: p.reject(admin_id, reason, notes))

    async def suspend(self, product_id: int, admin_id: int, reason: str) -> ProductResponse:
        if not reason or not reason.strip():
            raise DomainValidationError("Suspension reason is required")
        return await self._transition(product_id, lambda p: p.suspend(admin_id, reason))

    async def unsuspend(self, product_id: int) -> ProductResponse:
        return await self._transition(product_id, lambda p: p.unsuspend())

    async def restore(self, product_id: int, admin_id: int) -> ProductResponse:
        return await self._transition(product_id, lambda p: p.restore(admin_id))

    async def hard_delete(self, product_id: int) -> int:
        async with self.unit_of_work:
            await get_or_raise(self.unit_of_work.products, product_id, "Product")
            removed = await cascade_delete(self.unit_of_work, "products", product_id)
            await self.unit_of_work.commit()

        logger.info("Product %s hard deleted, %d record(s) removed", product_id, removed)
        return removed

    async def list_products(self, status: Optional[ProductStatus] = None) -> List[ProductAdminResponse]:
        async with self.unit_of_work:
            if status is None:
                products = await self.unit_of_work.products.list_all()
            else:
                products = await self.unit_of_work.products.list_by(status=status)

            supplier_names = {}
            category_names = {}
            views = []
            for product in products:
                if product.supplier_id not in supplier_names:
                    supplier = await self.unit_of_work.suppliers.get_by_id(product.supplier_id)
                    supplier_names[product.supplier_id] = supplier.company_name if supplier else None
                if product.category_id is not None and product.category_id not in category_names:
                    category = await self.unit_of_work.categories.get_by_id(product.category_id)
                    category_names[product.category_id] = category.name if category else None
                views.append(ProductAdminResponse.model_validate(product).model_copy(update={
                    "supplier_name": supplier_names[product.supplier_id],
                    "category_name": category_names.get(product.category_id),
                }))

        # Newest first, matching the admin queues
        return sorted(views, key=lambda v: (v.created_at, v.id), reverse=True)
