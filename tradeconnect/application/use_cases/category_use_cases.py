"""Category management"""

import logging
from typing import List, Optional

from ...domain.entities.category import Category
from ...domain.exceptions import DomainValidationError, EntityNotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.catalog_dtos import CategoryCreateDto, CategoryResponse, CategoryTreeResponse, CategoryUpdateDto
from .common import get_or_raise

logger = logging.getLogger(__name__)


def _by_sort_order(categories: List[Category]) -> List[Category]:
    return sorted(categories, key=lambda c: (c.sort_order, c.id))


class CategoryUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def list_active(self) -> List[CategoryResponse]:
        async with self.unit_of_work:
            categories = await self.unit_of_work.categories.list_by(is_active=True)
        return [CategoryResponse.model_validate(c) for c in _by_sort_order(categories)]

    async def list_all(self) -> List[CategoryResponse]:
        async with self.unit_of_work:
            categories = await self.unit_of_work.categories.list_all()
        return [CategoryResponse.model_validate(c) for c in categories]

    async def get_category(self, category_id: int) -> CategoryResponse:
        async with self.unit_of_work:
            category = await get_or_raise(self.unit_of_work.categories, category_id, "Category")
        return CategoryResponse.model_validate(category)

    async def list_subcategories(self, parent_id: int) -> List[CategoryResponse]:
        async with self.unit_of_work:
            children = await self.unit_of_work.categories.list_by(parent_id=parent_id, is_active=True)
        return [CategoryResponse.model_validate(c) for c in _by_sort_order(children)]

    async def list_tree(self) -> List[CategoryTreeResponse]:
        """Active root categories, each with its active subcategories"""
        async with self.unit_of_work:
            active = await self.unit_of_work.categories.list_by(is_active=True)

        tree = []
        for root in _by_sort_order([c for c in active if c.is_root]):
            children = _by_sort_order([c for c in active if c.parent_id == root.id])
            node = CategoryTreeResponse.model_validate(root)
            node.subcategories = [CategoryResponse.model_validate(c) for c in children]
            tree.append(node)
        return tree

    async def _check_parent(self, parent_id: Optional[int], category_id: Optional[int] = None) -> None:
        """The parent must exist and, when moving a category, must not sit below it"""
        if parent_id is None:
            return
        parent = await self.unit_of_work.categories.get_by_id(parent_id)
        if parent is None:
            raise DomainValidationError(f"Parent category {parent_id} does not exist")
        if category_id is None:
            return

        seen = set()
        ancestor = parent
        while ancestor is not None and ancestor.id not in seen:
            if ancestor.id == category_id:
                raise DomainValidationError("A category cannot be moved under itself or its subcategories")
            seen.add(ancestor.id)
            if ancestor.parent_id is None:
                break
            ancestor = await self.unit_of_work.categories.get_by_id(ancestor.parent_id)

    async def create(self, request: CategoryCreateDto, admin_id: int) -> CategoryResponse:
        async with self.unit_of_work:
            await self._check_parent(request.parent_id)
            category = Category(created_by=admin_id, **request.model_dump())
            category = await self.unit_of_work.categories.add(category)
            await self.unit_of_work.commit()

        logger.info("Category %s created by admin %s", category.id, admin_id)
        return CategoryResponse.model_validate(category)

    async def update(self, category_id: int, request: CategoryUpdateDto) -> CategoryResponse:
        data = request.model_dump(exclude_unset=True)
        async with self.unit_of_work:
            category = await get_or_raise(self.unit_of_work.categories, category_id, "Category")
            if "parent_id" in data:
                await self._check_parent(data["parent_id"], category_id)
            category.update_details(data)
            await self.unit_of_work.categories.update(category)
            await self.unit_of_work.commit()
        return CategoryResponse.model_validate(category)

    async def delete(self, category_id: int) -> bool:
        """Delete a category.

        Returns False, keeping the category, while it has subcategories.
        A category still referenced by products is only deactivated.
        Otherwise the row is removed.
        """
        async with self.unit_of_work:
            category = await self.unit_of_work.categories.get_by_id(category_id)
            if category is None:
                raise EntityNotFoundError("Category", category_id)

            if await self.unit_of_work.categories.count_by(parent_id=category_id):
                return False

            if await self.unit_of_work.products.count_by(category_id=category_id):
                category.deactivate()
                await self.unit_of_work.categories.update(category)
                logger.info("Category %s deactivated, products still reference it", category_id)
            else:
                await self.unit_of_work.categories.delete(category_id)
                logger.info("Category %s deleted", category_id)

            await self.unit_of_work.commit()
        return True
