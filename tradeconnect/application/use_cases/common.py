"""Lookups shared by the use cases"""

from typing import Optional

from ...domain.entities.buyer import BuyerProfile
from ...domain.entities.product import Product
from ...domain.entities.supplier import SupplierProfile
from ...domain.exceptions import EntityNotFoundError
from ...domain.repositories.base import IRepository
from ...domain.repositories.unit_of_work import IUnitOfWork


async def get_or_raise(repository: IRepository, entity_id: int, entity: str):
    """Fetch by id or raise EntityNotFoundError"""
    found = await repository.get_by_id(entity_id)
    if found is None:
        raise EntityNotFoundError(entity, entity_id)
    return found


async def supplier_for_user(uow: IUnitOfWork, user_id: int) -> SupplierProfile:
    supplier: Optional[SupplierProfile] = await uow.suppliers.get_by_user_id(user_id)
    if supplier is None:
        raise EntityNotFoundError("Supplier profile", message="Supplier profile not found")
    return supplier


async def buyer_for_user(uow: IUnitOfWork, user_id: int) -> BuyerProfile:
    buyer: Optional[BuyerProfile] = await uow.buyers.get_by_user_id(user_id)
    if buyer is None:
        raise EntityNotFoundError("Buyer profile", message="Buyer profile not found")
    return buyer


async def is_publicly_visible(uow: IUnitOfWork, product: Product) -> bool:
    """Approved, and the owning supplier is neither suspended nor deleted"""
    if not product.is_approved:
        return False
    supplier = await uow.suppliers.get_by_id(product.supplier_id)
    return supplier is not None and not supplier.hides_products


async def visible_product_or_raise(uow: IUnitOfWork, product_id: int) -> Product:
    """Fetch a product the public may see; anything else reads as missing"""
    product = await uow.products.get_by_id(product_id)
    if product is None or not await is_publicly_visible(uow, product):
        raise EntityNotFoundError("Product", product_id)
    return product
