"""Product domain events"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProductSubmitted:
    product_id: int
    supplier_id: int
    name: str


@dataclass(frozen=True)
class ProductApproved:
    product_id: int
    supplier_id: int
    name: str
    notes: Optional[str] = None


@dataclass(frozen=True)
class ProductRejected:
    product_id: int
    supplier_id: int
    name: str
    reason: Optional[str] = None


@dataclass(frozen=True)
class ProductSuspended:
    product_id: int
    supplier_id: int
    name: str
    reason: str


@dataclass(frozen=True)
class ProductReactivated:
    product_id: int
    supplier_id: int
    name: str


@dataclass(frozen=True)
class ProductRestored:
    product_id: int
    supplier_id: int
    name: str
