"""Supplier profile domain events"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SupplierProfileCreated:
    supplier_id: int
    user_id: int
    company_name: str


@dataclass(frozen=True)
class SupplierApproved:
    supplier_id: int
    user_id: int


@dataclass(frozen=True)
class SupplierRejected:
    supplier_id: int
    user_id: int
    reason: Optional[str]


@dataclass(frozen=True)
class SupplierSuspended:
    supplier_id: int
    user_id: int
    reason: str


@dataclass(frozen=True)
class SupplierReactivated:
    supplier_id: int
    user_id: int


@dataclass(frozen=True)
class SupplierRestored:
    supplier_id: int
    user_id: int


@dataclass(frozen=True)
class SupplierDeleted:
    supplier_id: int
    user_id: int
