"""Inquiry entity with admin gate and conversation status"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..enums import InquiryApprovalStatus, InquiryStatus
from ..events.inquiry_events import InquiryApproved, InquiryRejected, InquirySubmitted
from ..exceptions import DomainValidationError, InvalidTransitionError
from ..lifecycle import INQUIRY_APPROVAL_TRANSITIONS, INQUIRY_TRANSITIONS, ensure_transition


@dataclass
class Inquiry:
    buyer_id: int
    supplier_id: int
    subject: str
    message: str
    id: Optional[int] = None
    product_id: Optional[int] = None
    quantity: Optional[int] = None

    status: InquiryStatus = InquiryStatus.PENDING
    admin_approval_status: InquiryApprovalStatus = InquiryApprovalStatus.PENDING
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None

    supplier_reply: Optional[str] = None
    replied_at: Optional[datetime] = None
    buyer_reply: Optional[str] = None
    buyer_replied_at: Optional[datetime] = None

    created_at: datetime = field(default_factory=datetime.utcnow)

    # Domain events
    _events: List = field(default_factory=list, init=False, repr=False)

    def record_creation(self) -> None:
        self._events.append(InquirySubmitted(
            inquiry_id=self.id,
            buyer_id=self.buyer_id,
            supplier_id=self.supplier_id,
            subject=self.subject,
        ))

    def _clear_buyer_reply(self) -> None:
        # Admin action forces the buyer to re-engage
        self.buyer_reply = None
        self.buyer_replied_at = None

    def approve(self, admin_id: int) -> None:
        self.admin_approval_status = ensure_transition(
            INQUIRY_APPROVAL_TRANSITIONS, "Inquiry", "approve", self.admin_approval_status
        )
        self.approved_by = admin_id
        self.approved_at = datetime.utcnow()
        self.rejection_reason = None
        self._clear_buyer_reply()
        self._events.append(InquiryApproved(
            inquiry_id=self.id,
            supplier_id=self.supplier_id,
            subject=self.subject,
        ))

    def reject(self, reason: str) -> None:
        if not reason or not reason.strip():
            raise DomainValidationError("Rejection reason is required")
        self.admin_approval_status = ensure_transition(
            INQUIRY_APPROVAL_TRANSITIONS, "Inquiry", "reject", self.admin_approval_status
        )
        self.approved_by = None
        self.approved_at = None
        self.rejection_reason = reason
        self._clear_buyer_reply()
        self._events.append(InquiryRejected(
            inquiry_id=self.id,
            buyer_id=self.buyer_id,
            subject=self.subject,
            reason=reason,
        ))

    def _ensure_conversation_open(self) -> InquiryStatus:
        if self.admin_approval_status != InquiryApprovalStatus.APPROVED:
            raise InvalidTransitionError("Inquiry", "reply to", self.admin_approval_status)
        return ensure_transition(INQUIRY_TRANSITIONS, "Inquiry", "reply", self.status)

    def reply_as_supplier(self, text: str) -> None:
        self.status = self._ensure_conversation_open()
        self.supplier_reply = text
        self.replied_at = datetime.utcnow()

    def reply_as_buyer(self, text: str) -> None:
        self.status = self._ensure_conversation_open()
        self.buyer_reply = text
        self.buyer_replied_at = datetime.utcnow()

    def delete(self) -> None:
        self.status = ensure_transition(INQUIRY_TRANSITIONS, "Inquiry", "delete", self.status)

    def recover(self) -> None:
        ensure_transition(INQUIRY_TRANSITIONS, "Inquiry", "recover", self.status)
        self.status = InquiryStatus.REPLIED if self.supplier_reply else InquiryStatus.PENDING

    @property
    def is_approved(self) -> bool:
        return self.admin_approval_status == InquiryApprovalStatus.APPROVED

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events
