"""Inquiry domain events"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InquirySubmitted:
    inquiry_id: int
    buyer_id: int
    supplier_id: int
    subject: str


@dataclass(frozen=True)
class InquiryApproved:
    inquiry_id: int
    supplier_id: int
    subject: str


@dataclass(frozen=True)
class InquiryRejected:
    inquiry_id: int
    buyer_id: int
    subject: str
    reason: str
