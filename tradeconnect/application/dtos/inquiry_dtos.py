"""Inquiry DTOs"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.enums import InquiryApprovalStatus, InquiryStatus


class InquiryCreateDto(BaseModel):
    supplier_id: int
    product_id: Optional[int] = None
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)
    quantity: Optional[int] = Field(default=None, ge=1)


class InquiryReplyDto(BaseModel):
    reply: str = Field(min_length=1)


class InquiryRejectDto(BaseModel):
    reason: str = Field(default="Rejected by admin", min_length=1)


class InquiryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    buyer_id: int
    supplier_id: int
    product_id: Optional[int] = None
    subject: str
    message: str
    quantity: Optional[int] = None
    status: InquiryStatus
    admin_approval_status: InquiryApprovalStatus
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    supplier_reply: Optional[str] = None
    replied_at: Optional[datetime] = None
    buyer_reply: Optional[str] = None
    buyer_replied_at: Optional[datetime] = None
    created_at: datetime


class EnrichedInquiryResponse(InquiryResponse):
    """Inquiry joined with display names, computed per request"""
    buyer_name: str
    buyer_email: str
    supplier_name: str
    product_name: str


class InquiryStatsResponse(BaseModel):
    total: int
    pending_approval: int
    approved: int
    rejected: int
    replied: int
    deleted: int
