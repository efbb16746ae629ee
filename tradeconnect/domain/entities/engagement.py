"""Buyer engagement records"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class SavedProduct:
    buyer_id: int
    product_id: int
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class FollowedSupplier:
    buyer_id: int
    supplier_id: int
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
