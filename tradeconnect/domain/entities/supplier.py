"""Supplier profile entity with moderation state machine"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..enums import SupplierStatus
from ..events.supplier_events import (
    SupplierApproved,
    SupplierDeleted,
    SupplierProfileCreated,
    SupplierReactivated,
    SupplierRejected,
    SupplierRestored,
    SupplierSuspended,
)
from ..exceptions import DomainValidationError
from ..lifecycle import SUPPLIER_TRANSITIONS, allowed_actions, ensure_transition


ONBOARDING_FINAL_STEP = 7

REQUIRED_AGREEMENTS = ("agrees_to_terms", "agrees_to_privacy", "declares_info_accurate")


@dataclass
class SupplierProfile:
    user_id: int
    company_name: str
    id: Optional[int] = None

    description: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    profile_image: Optional[str] = None
    verified: bool = False
    rating: float = 0.0
    status: SupplierStatus = SupplierStatus.PENDING_APPROVAL

    # Company registration
    business_registration_number: Optional[str] = None
    country_of_registration: Optional[str] = None
    city_of_registration: Optional[str] = None
    year_established: Optional[int] = None
    legal_entity_type: Optional[str] = None
    vat_tax_id: Optional[str] = None
    registered_business_address: Optional[str] = None

    # Contact
    primary_contact_name: Optional[str] = None
    contact_job_title: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    company_website: Optional[str] = None
    whatsapp_number: Optional[str] = None
    social_media_linkedin: Optional[str] = None
    social_media_youtube: Optional[str] = None
    social_media_facebook: Optional[str] = None
    social_media_tiktok: Optional[str] = None
    social_media_instagram: Optional[str] = None
    social_media_pinterest: Optional[str] = None
    social_media_x: Optional[str] = None

    main_product_category: Optional[str] = None

    # Compliance documents (URLs)
    business_license: Optional[str] = None
    tax_certificate: Optional[str] = None
    export_license: Optional[str] = None
    quality_certifications: List[str] = field(default_factory=list)
    factory_photos: List[str] = field(default_factory=list)

    # Logistics
    shipping_methods: List[str] = field(default_factory=list)
    incoterms_supported: List[str] = field(default_factory=list)
    regions_shipped_to: List[str] = field(default_factory=list)
    key_clients: List[str] = field(default_factory=list)
    testimonials: List[str] = field(default_factory=list)

    # Onboarding
    onboarding_completed: bool = False
    onboarding_step: int = 1
    profile_draft_data: Optional[str] = None
    agrees_to_terms: bool = False
    agrees_to_privacy: bool = False
    declares_info_accurate: bool = False

    # Moderation metadata
    rejected_by: Optional[int] = None
    rejected_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    suspended_by: Optional[int] = None
    suspended_at: Optional[datetime] = None
    suspension_reason: Optional[str] = None
    deleted_by: Optional[int] = None
    deleted_at: Optional[datetime] = None

    created_at: datetime = field(default_factory=datetime.utcnow)

    # Domain events
    _events: List = field(default_factory=list, init=False, repr=False)

    @classmethod
    def create_empty(cls, user_id: int) -> 'SupplierProfile':
        """Placeholder profile created at registration, completed through onboarding"""
        return cls(user_id=user_id, company_name=f"Company {user_id}")

    def record_creation(self) -> None:
        self._events.append(SupplierProfileCreated(
            supplier_id=self.id,
            user_id=self.user_id,
            company_name=self.company_name,
        ))

    def _transition(self, action: str) -> SupplierStatus:
        return ensure_transition(SUPPLIER_TRANSITIONS, "Supplier", action, self.status)

    def update_details(self, data: Dict[str, Any]) -> None:
        """Patch descriptive fields; status and moderation metadata are untouched"""
        for key, value in data.items():
            if key in EDITABLE_FIELDS:
                setattr(self, key, value)

    def save_draft(self, draft: str) -> None:
        self.profile_draft_data = draft

    def submit_onboarding(self, data: Dict[str, Any]) -> None:
        """Business logic: completed onboarding goes (back) to the review queue"""
        target = self._transition("submit_onboarding")
        if not all(data.get(key) for key in REQUIRED_AGREEMENTS):
            raise DomainValidationError(
                "Terms, privacy policy and accuracy declaration must be accepted"
            )
        self.update_details(data)
        self.onboarding_completed = True
        self.onboarding_step = ONBOARDING_FINAL_STEP
        self.verified = False
        self.status = target
        self.profile_draft_data = None

    def approve(self) -> None:
        """Business logic: approve supplier"""
        self.status = self._transition("approve")
        self.verified = True
        self._events.append(SupplierApproved(supplier_id=self.id, user_id=self.user_id))

    def reject(self, admin_id: int, reason: Optional[str] = None) -> None:
        """Business logic: reject supplier"""
        self.status = self._transition("reject")
        self.verified = False
        self.rejected_by = admin_id
        self.rejected_at = datetime.utcnow()
        self.rejection_reason = reason
        self._events.append(SupplierRejected(
            supplier_id=self.id,
            user_id=self.user_id,
            reason=reason,
        ))

    def suspend(self, admin_id: int, reason: str) -> None:
        """Business logic: suspend supplier"""
        self.status = self._transition("suspend")
        self.suspended_by = admin_id
        self.suspended_at = datetime.utcnow()
        self.suspension_reason = reason
        self._events.append(SupplierSuspended(
            supplier_id=self.id,
            user_id=self.user_id,
            reason=reason,
        ))

    def activate(self) -> None:
        """Business logic: lift a suspension (no-op when already active)"""
        previous = self.status
        self.status = self._transition("activate")
        if previous == SupplierStatus.ACTIVE:
            return

        self.suspended_by = None
        self.suspended_at = None
        self.suspension_reason = None
        self._events.append(SupplierReactivated(supplier_id=self.id, user_id=self.user_id))

    def delete(self, admin_id: int) -> None:
        """Business logic: soft delete, the record stays for audit"""
        self.status = self._transition("delete")
        self.verified = False
        self.deleted_by = admin_id
        self.deleted_at = datetime.utcnow()
        self._events.append(SupplierDeleted(supplier_id=self.id, user_id=self.user_id))

    def restore(self) -> None:
        """Business logic: send a rejected supplier back to review"""
        self.status = self._transition("restore")
        self.verified = False
        self.rejected_by = None
        self.rejected_at = None
        self.rejection_reason = None
        self._events.append(SupplierRestored(supplier_id=self.id, user_id=self.user_id))

    @property
    def is_listed(self) -> bool:
        return self.status == SupplierStatus.ACTIVE

    @property
    def hides_products(self) -> bool:
        return self.status in (SupplierStatus.SUSPENDED, SupplierStatus.DELETED)

    @property
    def available_actions(self) -> List[str]:
        return allowed_actions(SUPPLIER_TRANSITIONS, self.status)

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events


_PROTECTED_FIELDS = {
    "id",
    "user_id",
    "status",
    "verified",
    "rating",
    "onboarding_completed",
    "rejected_by",
    "rejected_at",
    "rejection_reason",
    "suspended_by",
    "suspended_at",
    "suspension_reason",
    "deleted_by",
    "deleted_at",
    "created_at",
}

EDITABLE_FIELDS = frozenset(
    f.name for f in fields(SupplierProfile)
    if f.name not in _PROTECTED_FIELDS and not f.name.startswith("_")
)
