"""Inquiry ORM Model"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import InquiryApprovalStatus, InquiryStatus
from .types import enum_column_type


class InquiryModel(Base):
    __tablename__ = 'inquiries'

    id = Column(Integer, primary_key=True, index=True)
    buyer_id = Column(Integer, ForeignKey('buyer_profiles.id'), nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey('supplier_profiles.id'), nullable=False, index=True)
    # No foreign key: inquiries outlive hard-deleted products
    product_id = Column(Integer, nullable=True)
    subject = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=True)

    status = Column(enum_column_type(InquiryStatus), default=InquiryStatus.PENDING, nullable=False)
    admin_approval_status = Column(
        enum_column_type(InquiryApprovalStatus),
        default=InquiryApprovalStatus.PENDING,
        nullable=False,
        index=True,
    )
    approved_by = Column(Integer, nullable=True)
    approved_at = Column(DateTime, nullable=True)
    rejection_reason = Column(Text, nullable=True)

    supplier_reply = Column(Text, nullable=True)
    replied_at = Column(DateTime, nullable=True)
    buyer_reply = Column(Text, nullable=True)
    buyer_replied_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
