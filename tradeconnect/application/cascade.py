"""Hard deletion along the declared ownership edges"""

import logging
from typing import Awaitable, Callable, Dict

from ..domain.ownership import edges_owned_by
from ..domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


async def _release_category_slot(uow: IUnitOfWork, product_id: int) -> None:
    product = await uow.products.get_by_id(product_id)
    if product is None or product.category_id is None:
        return
    category = await uow.categories.get_by_id(product.category_id)
    if category is not None:
        category.decrement_product_count()
        await uow.categories.update(category)


BEFORE_DELETE: Dict[str, Callable[[IUnitOfWork, int], Awaitable[None]]] = {
    "products": _release_category_slot,
}


async def cascade_delete(uow: IUnitOfWork, table: str, entity_id: int) -> int:
    """Hard delete ``entity_id`` from ``table`` and, first, everything it owns.

    Returns the number of records removed. Runs inside the caller's unit of
    work, which decides whether the whole tree commits.
    """
    removed = 0
    for edge in edges_owned_by(table):
        children = await getattr(uow, edge.child).list_by(**{edge.key: entity_id})
        for child in children:
            removed += await cascade_delete(uow, edge.child, child.id)

    hook = BEFORE_DELETE.get(table)
    if hook is not None:
        await hook(uow, entity_id)

    await getattr(uow, table).delete(entity_id)
    logger.debug("Deleted %s %s (%d owned record(s))", table, entity_id, removed)
    return removed + 1
