"""
Status transition tables.

Each table maps an action name to the statuses it may start from and the
status it leads to. Entities call ``ensure_transition`` before mutating
anything, so an illegal action never leaves a half-updated record.
"""

from typing import Dict, Mapping

from .enums import (
    BuyerStatus,
    InquiryApprovalStatus,
    InquiryStatus,
    ProductStatus,
    SupplierStatus,
)
from .exceptions import InvalidTransitionError


TransitionTable = Mapping[str, Mapping[object, object]]


SUPPLIER_TRANSITIONS: Dict[str, Dict[SupplierStatus, SupplierStatus]] = {
    "submit_onboarding": {
        SupplierStatus.PENDING_APPROVAL: SupplierStatus.PENDING_APPROVAL,
        SupplierStatus.REJECTED: SupplierStatus.PENDING_APPROVAL,
    },
    "approve": {
        SupplierStatus.PENDING_APPROVAL: SupplierStatus.ACTIVE,
    },
    "reject": {
        SupplierStatus.PENDING_APPROVAL: SupplierStatus.REJECTED,
    },
    "suspend": {
        SupplierStatus.ACTIVE: SupplierStatus.SUSPENDED,
    },
    "activate": {
        SupplierStatus.SUSPENDED: SupplierStatus.ACTIVE,
        SupplierStatus.ACTIVE: SupplierStatus.ACTIVE,
    },
    "delete": {
        SupplierStatus.ACTIVE: SupplierStatus.DELETED,
        SupplierStatus.PENDING_APPROVAL: SupplierStatus.DELETED,
        SupplierStatus.REJECTED: SupplierStatus.DELETED,
        SupplierStatus.SUSPENDED: SupplierStatus.DELETED,
    },
    "restore": {
        SupplierStatus.REJECTED: SupplierStatus.PENDING_APPROVAL,
    },
}


BUYER_TRANSITIONS: Dict[str, Dict[BuyerStatus, BuyerStatus]] = {
    "suspend": {
        BuyerStatus.ACTIVE: BuyerStatus.SUSPENDED,
    },
    "activate": {
        BuyerStatus.SUSPENDED: BuyerStatus.ACTIVE,
        BuyerStatus.ACTIVE: BuyerStatus.ACTIVE,
    },
}


PRODUCT_TRANSITIONS: Dict[str, Dict[ProductStatus, ProductStatus]] = {
    "publish": {
        ProductStatus.DRAFT: ProductStatus.PENDING,
    },
    "approve": {
        ProductStatus.PENDING: ProductStatus.APPROVED,
    },
    "reject": {
        ProductStatus.PENDING: ProductStatus.REJECTED,
    },
    "suspend": {
        ProductStatus.APPROVED: ProductStatus.SUSPENDED,
    },
    "unsuspend": {
        ProductStatus.SUSPENDED: ProductStatus.APPROVED,
    },
    "restore": {
        ProductStatus.REJECTED: ProductStatus.PENDING,
    },
    "soft_delete": {
        ProductStatus.DRAFT: ProductStatus.DELETED,
        ProductStatus.PENDING: ProductStatus.DELETED,
        ProductStatus.APPROVED: ProductStatus.DELETED,
        ProductStatus.REJECTED: ProductStatus.DELETED,
        ProductStatus.SUSPENDED: ProductStatus.DELETED,
    },
    "recover": {
        ProductStatus.DELETED: ProductStatus.PENDING,
    },
    # Any edit of reviewed content sends the product back for review
    "edit": {
        ProductStatus.DRAFT: ProductStatus.DRAFT,
        ProductStatus.PENDING: ProductStatus.PENDING,
        ProductStatus.APPROVED: ProductStatus.PENDING,
        ProductStatus.REJECTED: ProductStatus.PENDING,
        ProductStatus.SUSPENDED: ProductStatus.SUSPENDED,
    },
}


INQUIRY_APPROVAL_TRANSITIONS: Dict[str, Dict[InquiryApprovalStatus, InquiryApprovalStatus]] = {
    "approve": {
        InquiryApprovalStatus.PENDING: InquiryApprovalStatus.APPROVED,
        InquiryApprovalStatus.REJECTED: InquiryApprovalStatus.APPROVED,
    },
    "reject": {
        InquiryApprovalStatus.PENDING: InquiryApprovalStatus.REJECTED,
        InquiryApprovalStatus.APPROVED: InquiryApprovalStatus.REJECTED,
    },
}


INQUIRY_TRANSITIONS: Dict[str, Dict[InquiryStatus, InquiryStatus]] = {
    "reply": {
        InquiryStatus.PENDING: InquiryStatus.REPLIED,
        InquiryStatus.REPLIED: InquiryStatus.REPLIED,
    },
    "delete": {
        InquiryStatus.PENDING: InquiryStatus.DELETED,
        InquiryStatus.REPLIED: InquiryStatus.DELETED,
    },
    # recover picks PENDING or REPLIED depending on whether the supplier answered
    "recover": {
        InquiryStatus.DELETED: InquiryStatus.PENDING,
    },
}


def ensure_transition(table: TransitionTable, entity: str, action: str, current):
    """Return the target status for ``action`` or raise InvalidTransitionError."""
    allowed = table.get(action)
    if allowed is None or current not in allowed:
        raise InvalidTransitionError(entity, action, current)
    return allowed[current]


def allowed_actions(table: TransitionTable, current) -> list:
    """List the actions that may be taken from ``current``."""
    return [action for action, sources in table.items() if current in sources]
