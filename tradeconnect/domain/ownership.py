"""
Ownership edges between stored entities.

An edge ``OwnershipEdge("saved_products", "buyer_id", "buyers")`` reads
"a saved product is owned by the buyer named in its ``buyer_id``". Hard
deleting an owner removes every owned record first, recursively. Names are
the repository attributes of the unit of work.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class OwnershipEdge:
    child: str
    key: str
    owner: str


OWNERSHIP_EDGES: List[OwnershipEdge] = [
    OwnershipEdge("suppliers", "user_id", "users"),
    OwnershipEdge("buyers", "user_id", "users"),
    OwnershipEdge("notifications", "user_id", "users"),
    OwnershipEdge("saved_products", "buyer_id", "buyers"),
    OwnershipEdge("followed_suppliers", "buyer_id", "buyers"),
    OwnershipEdge("inquiries", "buyer_id", "buyers"),
    OwnershipEdge("products", "supplier_id", "suppliers"),
    OwnershipEdge("followed_suppliers", "supplier_id", "suppliers"),
    OwnershipEdge("inquiries", "supplier_id", "suppliers"),
    OwnershipEdge("saved_products", "product_id", "products"),
]


def edges_owned_by(owner: str) -> List[OwnershipEdge]:
    return [edge for edge in OWNERSHIP_EDGES if edge.owner == owner]
