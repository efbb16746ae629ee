"""Inquiry repository interface"""

from ..entities.inquiry import Inquiry
from .base import IRepository


class IInquiryRepository(IRepository[Inquiry]):
    pass
