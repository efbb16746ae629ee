"""Category entity"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from ..exceptions import DomainValidationError


@dataclass
class Category:
    name: str
    id: Optional[int] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[int] = None
    product_count: int = 0
    is_active: bool = True
    sort_order: int = 0
    created_by: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def update_details(self, data: Dict[str, Any]) -> None:
        for key, value in data.items():
            if key in EDITABLE_FIELDS:
                setattr(self, key, value)
        if self.parent_id is not None and self.parent_id == self.id:
            raise DomainValidationError("A category cannot be its own parent")

    def deactivate(self) -> None:
        self.is_active = False

    def increment_product_count(self) -> None:
        self.product_count += 1

    def decrement_product_count(self) -> None:
        self.product_count = max(0, self.product_count - 1)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


EDITABLE_FIELDS = frozenset({
    "name",
    "icon",
    "image",
    "description",
    "parent_id",
    "is_active",
    "sort_order",
})
