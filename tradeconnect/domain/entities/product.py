"""Product entity with moderation state machine"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..enums import ProductStatus
from ..events.product_events import (
    ProductApproved,
    ProductReactivated,
    ProductRejected,
    ProductRestored,
    ProductSubmitted,
    ProductSuspended,
)
from ..lifecycle import PRODUCT_TRANSITIONS, allowed_actions, ensure_transition


@dataclass
class Product:
    supplier_id: int
    name: str
    id: Optional[int] = None
    category_id: Optional[int] = None
    description: Optional[str] = None
    price: Optional[float] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_order: Optional[int] = None
    unit: Optional[str] = None
    images: List[str] = field(default_factory=list)
    video_url: Optional[str] = None
    specifications: Optional[str] = None

    # B2B details
    materials: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    weight: Optional[str] = None
    dimensions: Optional[str] = None
    shipping_terms: Optional[str] = None
    incoterms: Optional[str] = None
    packaging_details: Optional[str] = None
    lead_time: Optional[str] = None
    payment_terms: Optional[str] = None
    certifications: List[str] = field(default_factory=list)
    quality_grade: Optional[str] = None
    origin: Optional[str] = None
    supply_capacity: Optional[str] = None
    moq: Optional[str] = None
    source_url: Optional[str] = None

    status: ProductStatus = ProductStatus.PENDING

    # Counters
    views: int = 0
    inquiries: int = 0
    rating: float = 0.0

    # Review metadata
    reviewed_by: Optional[int] = None
    reviewed_at: Optional[datetime] = None
    review_notes: Optional[str] = None
    rejected_by: Optional[int] = None
    rejected_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    suspended_by: Optional[int] = None
    suspended_at: Optional[datetime] = None
    suspension_reason: Optional[str] = None
    restored_by: Optional[int] = None
    restored_at: Optional[datetime] = None
    deleted_by: Optional[int] = None
    deleted_at: Optional[datetime] = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    # Domain events
    _events: List = field(default_factory=list, init=False, repr=False)

    @classmethod
    def create(cls, supplier_id: int, data: Dict[str, Any], as_draft: bool = False) -> 'Product':
        """Factory method: new products start as a draft or in the review queue"""
        product = cls(supplier_id=supplier_id, name=data["name"])
        product.update_details(data)
        product.status = ProductStatus.DRAFT if as_draft else ProductStatus.PENDING
        return product

    def record_creation(self) -> None:
        if self.status == ProductStatus.PENDING:
            self._submitted()

    def _submitted(self) -> None:
        self._events.append(ProductSubmitted(
            product_id=self.id,
            supplier_id=self.supplier_id,
            name=self.name,
        ))

    def _transition(self, action: str) -> ProductStatus:
        return ensure_transition(PRODUCT_TRANSITIONS, "Product", action, self.status)

    def _touch(self) -> None:
        self.updated_at = datetime.utcnow()

    def update_details(self, data: Dict[str, Any]) -> None:
        for key, value in data.items():
            if key in EDITABLE_FIELDS:
                setattr(self, key, value)

    def edit(self, data: Dict[str, Any]) -> None:
        """Business logic: supplier edit; reviewed content goes back to review"""
        target = self._transition("edit")
        self.update_details(data)
        self.status = target
        self._touch()

    def publish(self) -> None:
        """Business logic: submit a draft for review"""
        self.status = self._transition("publish")
        self._touch()
        self._submitted()

    def approve(self, admin_id: int, notes: Optional[str] = None) -> None:
        self.status = self._transition("approve")
        self.reviewed_by = admin_id
        self.reviewed_at = datetime.utcnow()
        self.review_notes = notes
        self._touch()
        self._events.append(ProductApproved(
            product_id=self.id,
            supplier_id=self.supplier_id,
            name=self.name,
            notes=notes,
        ))

    def reject(self, admin_id: int, reason: Optional[str] = None, notes: Optional[str] = None) -> None:
        self.status = self._transition("reject")
        now = datetime.utcnow()
        self.reviewed_by = admin_id
        self.reviewed_at = now
        self.review_notes = notes
        self.rejected_by = admin_id
        self.rejected_at = now
        self.rejection_reason = reason
        self._touch()
        self._events.append(ProductRejected(
            product_id=self.id,
            supplier_id=self.supplier_id,
            name=self.name,
            reason=reason,
        ))

    def suspend(self, admin_id: int, reason: str) -> None:
        self.status = self._transition("suspend")
        self.suspended_by = admin_id
        self.suspended_at = datetime.utcnow()
        self.suspension_reason = reason
        self._touch()
        self._events.append(ProductSuspended(
            product_id=self.id,
            supplier_id=self.supplier_id,
            name=self.name,
            reason=reason,
        ))

    def unsuspend(self) -> None:
        self.status = self._transition("unsuspend")
        self.suspended_by = None
        self.suspended_at = None
        self.suspension_reason = None
        self._touch()
        self._events.append(ProductReactivated(
            product_id=self.id,
            supplier_id=self.supplier_id,
            name=self.name,
        ))

    def restore(self, admin_id: int) -> None:
        """Business logic: admin sends a rejected product back to review"""
        self.status = self._transition("restore")
        self.restored_by = admin_id
        self.restored_at = datetime.utcnow()
        self.rejected_by = None
        self.rejected_at = None
        self.rejection_reason = None
        self._touch()
        self._events.append(ProductRestored(
            product_id=self.id,
            supplier_id=self.supplier_id,
            name=self.name,
        ))

    def soft_delete(self, actor_id: int) -> None:
        self.status = self._transition("soft_delete")
        self.deleted_by = actor_id
        self.deleted_at = datetime.utcnow()
        self._touch()

    def recover(self) -> None:
        self.status = self._transition("recover")
        self.deleted_by = None
        self.deleted_at = None
        self._touch()

    def increment_views(self) -> None:
        self.views += 1

    def increment_inquiries(self) -> None:
        self.inquiries += 1

    @property
    def is_approved(self) -> bool:
        return self.status == ProductStatus.APPROVED

    @property
    def available_actions(self) -> List[str]:
        return allowed_actions(PRODUCT_TRANSITIONS, self.status)

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events


EDITABLE_FIELDS = frozenset({
    "name",
    "category_id",
    "description",
    "price",
    "min_price",
    "max_price",
    "min_order",
    "unit",
    "images",
    "video_url",
    "specifications",
    "materials",
    "color",
    "size",
    "weight",
    "dimensions",
    "shipping_terms",
    "incoterms",
    "packaging_details",
    "lead_time",
    "payment_terms",
    "certifications",
    "quality_grade",
    "origin",
    "supply_capacity",
    "moq",
    "source_url",
})
