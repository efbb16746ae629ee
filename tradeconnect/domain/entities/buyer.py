"""Buyer profile entity"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..enums import BuyerStatus
from ..events.buyer_events import BuyerProfileCreated
from ..lifecycle import BUYER_TRANSITIONS, ensure_transition


@dataclass
class BuyerProfile:
    user_id: int
    company_name: str
    id: Optional[int] = None
    contact_name: Optional[str] = None
    industry: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    profile_image: Optional[str] = None
    status: BuyerStatus = BuyerStatus.ACTIVE
    suspension_reason: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    # Domain events
    _events: List = field(default_factory=list, init=False, repr=False)

    @classmethod
    def create_empty(cls, user_id: int) -> 'BuyerProfile':
        return cls(user_id=user_id, company_name=f"Company {user_id}")

    def record_creation(self) -> None:
        self._events.append(BuyerProfileCreated(
            buyer_id=self.id,
            user_id=self.user_id,
            company_name=self.company_name,
        ))

    def update_details(self, data: Dict[str, Any]) -> None:
        for key, value in data.items():
            if key in EDITABLE_FIELDS:
                setattr(self, key, value)

    def suspend(self, reason: str) -> None:
        self.status = ensure_transition(BUYER_TRANSITIONS, "Buyer", "suspend", self.status)
        self.suspension_reason = reason

    def activate(self) -> None:
        self.status = ensure_transition(BUYER_TRANSITIONS, "Buyer", "activate", self.status)
        self.suspension_reason = None

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events


EDITABLE_FIELDS = frozenset({
    "company_name",
    "contact_name",
    "industry",
    "description",
    "location",
    "website",
    "phone",
    "profile_image",
})
