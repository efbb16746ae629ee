"""
Domain event dispatcher.

Use cases commit their status change first and then hand the collected
events to ``EventDispatcher.dispatch``. The dispatcher writes the matching
user or admin notification records in a unit of work of its own. Delivery
is best-effort and at most once: if writing notifications fails the error
is logged and the already committed status change stands.
"""

import logging
from typing import Awaitable, Callable, Dict, Iterable, Optional, Union

from ..domain.entities.notification import AdminNotification, Notification
from ..domain.enums import AdminNotificationType, NotificationType, UserRole
from ..domain.events.buyer_events import BuyerProfileCreated
from ..domain.events.inquiry_events import InquiryApproved, InquiryRejected, InquirySubmitted
from ..domain.events.product_events import (
    ProductApproved,
    ProductReactivated,
    ProductRejected,
    ProductRestored,
    ProductSubmitted,
    ProductSuspended,
)
from ..domain.events.supplier_events import (
    SupplierApproved,
    SupplierDeleted,
    SupplierProfileCreated,
    SupplierReactivated,
    SupplierRejected,
    SupplierRestored,
    SupplierSuspended,
)
from ..domain.events.user_events import UserApproved, UserRegistered
from ..domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)

Record = Union[Notification, AdminNotification]
Handler = Callable[[IUnitOfWork, object], Awaitable[Optional[Record]]]

DASHBOARD_URLS = {
    UserRole.SUPPLIER: "/supplier/dashboard",
    UserRole.BUYER: "/buyer/dashboard",
    UserRole.ADMIN: "/admin",
}


class EventDispatcher:

    def __init__(self, unit_of_work_factory: Callable[[], IUnitOfWork]):
        self.unit_of_work_factory = unit_of_work_factory
        self._handlers: Dict[type, Handler] = {
            UserRegistered: self._user_registered,
            UserApproved: self._user_approved,
            SupplierProfileCreated: self._supplier_created,
            BuyerProfileCreated: self._buyer_created,
            SupplierApproved: self._supplier_approved,
            SupplierRejected: self._supplier_rejected,
            SupplierSuspended: self._supplier_suspended,
            SupplierReactivated: self._supplier_reactivated,
            SupplierRestored: self._supplier_restored,
            SupplierDeleted: self._supplier_deleted,
            ProductSubmitted: self._product_submitted,
            ProductApproved: self._product_approved,
            ProductRejected: self._product_rejected,
            ProductSuspended: self._product_suspended,
            ProductReactivated: self._product_reactivated,
            ProductRestored: self._product_restored,
            InquirySubmitted: self._inquiry_submitted,
            InquiryApproved: self._inquiry_approved,
            InquiryRejected: self._inquiry_rejected,
        }

    async def dispatch(self, events: Iterable) -> int:
        """Persist one notification per handled event; returns how many were written"""
        events = list(events)
        if not events:
            return 0

        written = 0
        try:
            async with self.unit_of_work_factory() as uow:
                for event in events:
                    handler = self._handlers.get(type(event))
                    if handler is None:
                        logger.debug("No notification handler for %s", type(event).__name__)
                        continue
                    record = await handler(uow, event)
                    if record is None:
                        continue
                    if isinstance(record, AdminNotification):
                        await uow.admin_notifications.add(record)
                    else:
                        await uow.notifications.add(record)
                    written += 1
                await uow.commit()
        except Exception:
            logger.exception("Failed to write notifications for %d domain event(s)", len(events))
            return 0

        logger.debug("Wrote %d notification(s) for %d event(s)", written, len(events))
        return written

    # Admin-facing

    async def _user_registered(self, uow, event: UserRegistered) -> Record:
        return AdminNotification(
            type=AdminNotificationType.NEW_USER_REGISTRATION,
            title="New User Registration",
            message=f"New {event.role.value} registered: {event.email}",
            related_id=event.user_id,
        )

    async def _supplier_created(self, uow, event: SupplierProfileCreated) -> Record:
        return AdminNotification(
            type=AdminNotificationType.NEW_SUPPLIER,
            title="New Supplier Registration",
            message=f"New supplier profile created: {event.company_name}",
            related_id=event.supplier_id,
        )

    async def _buyer_created(self, uow, event: BuyerProfileCreated) -> Record:
        return AdminNotification(
            type=AdminNotificationType.NEW_BUYER,
            title="New Buyer Registration",
            message=f"New buyer profile created: {event.company_name}",
            related_id=event.buyer_id,
        )

    async def _product_submitted(self, uow, event: ProductSubmitted) -> Record:
        return AdminNotification(
            type=AdminNotificationType.NEW_PRODUCT,
            title="New Product Submitted",
            message=f'Product "{event.name}" is awaiting review',
            related_id=event.product_id,
        )

    async def _inquiry_submitted(self, uow, event: InquirySubmitted) -> Record:
        return AdminNotification(
            type=AdminNotificationType.NEW_INQUIRY,
            title="New Inquiry",
            message=f'Inquiry "{event.subject}" is awaiting approval',
            related_id=event.inquiry_id,
        )

    # User-facing

    async def _user_approved(self, uow, event: UserApproved) -> Record:
        return Notification(
            user_id=event.user_id,
            type=NotificationType.USER_APPROVED,
            title="Account Verified & Approved",
            message="Your email has been verified and your account is now active.",
            action_url=DASHBOARD_URLS.get(event.role, "/"),
            action_text="Go to Dashboard",
        )

    async def _supplier_approved(self, uow, event: SupplierApproved) -> Record:
        return Notification(
            user_id=event.user_id,
            type=NotificationType.PROFILE_APPROVED,
            title="Profile Approved",
            message="Congratulations! Your supplier profile has been approved and is now active.",
            action_url="/supplier/dashboard",
            action_text="Go to Dashboard",
        )

    async def _supplier_rejected(self, uow, event: SupplierRejected) -> Record:
        reason = event.reason or "Please review your information and resubmit."
        return Notification(
            user_id=event.user_id,
            type=NotificationType.PROFILE_REJECTED,
            title="Profile Rejected",
            message=f"Your supplier profile has been rejected. Reason: {reason}",
            action_url="/supplier/enhanced-onboarding",
            action_text="Update Profile",
        )

    async def _supplier_suspended(self, uow, event: SupplierSuspended) -> Record:
        return Notification(
            user_id=event.user_id,
            type=NotificationType.PROFILE_SUSPENDED,
            title="Profile Suspended",
            message=f"Your supplier profile has been suspended. Reason: {event.reason}",
            action_url="/contact-support",
            action_text="Contact Support",
        )

    async def _supplier_reactivated(self, uow, event: SupplierReactivated) -> Record:
        return Notification(
            user_id=event.user_id,
            type=NotificationType.PROFILE_REACTIVATED,
            title="Profile Reactivated",
            message="Your supplier profile has been reactivated and is visible to buyers again.",
            action_url="/supplier/dashboard",
            action_text="Go to Dashboard",
        )

    async def _supplier_restored(self, uow, event: SupplierRestored) -> Record:
        return Notification(
            user_id=event.user_id,
            type=NotificationType.PROFILE_RESTORED,
            title="Profile Back Under Review",
            message="Your supplier profile has been returned to the review queue.",
            action_url="/supplier/enhanced-onboarding",
            action_text="Review Profile",
        )

    async def _supplier_deleted(self, uow, event: SupplierDeleted) -> Record:
        return Notification(
            user_id=event.user_id,
            type=NotificationType.PROFILE_DELETED,
            title="Profile Deleted",
            message="Your supplier profile has been removed by an administrator.",
            action_url="/contact-support",
            action_text="Contact Support",
        )

    async def _supplier_user_id(self, uow, supplier_id: int) -> Optional[int]:
        supplier = await uow.suppliers.get_by_id(supplier_id)
        if supplier is None:
            logger.warning("Supplier %s vanished before its notification was written", supplier_id)
            return None
        return supplier.user_id

    async def _product_notification(self, uow, event, type_, title, message, action_url, action_text):
        user_id = await self._supplier_user_id(uow, event.supplier_id)
        if user_id is None:
            return None
        return Notification(
            user_id=user_id,
            type=type_,
            title=title,
            message=message,
            action_url=action_url,
            action_text=action_text,
        )

    async def _product_approved(self, uow, event: ProductApproved):
        return await self._product_notification(
            uow, event,
            NotificationType.PRODUCT_APPROVED,
            "Product Approved",
            f'Your product "{event.name}" has been approved and is now live on the marketplace.',
            f"/products/{event.product_id}",
            "View Product",
        )

    async def _product_rejected(self, uow, event: ProductRejected):
        reason = event.reason or "Please review the product details and resubmit."
        return await self._product_notification(
            uow, event,
            NotificationType.PRODUCT_REJECTED,
            "Product Rejected",
            f'Your product "{event.name}" has been rejected. Reason: {reason}',
            f"/products/edit/{event.product_id}",
            "Edit Product",
        )

    async def _product_suspended(self, uow, event: ProductSuspended):
        return await self._product_notification(
            uow, event,
            NotificationType.PRODUCT_SUSPENDED,
            "Product Suspended",
            f'Your product "{event.name}" has been suspended. Reason: {event.reason}',
            f"/products/edit/{event.product_id}",
            "Edit Product",
        )

    async def _product_reactivated(self, uow, event: ProductReactivated):
        return await self._product_notification(
            uow, event,
            NotificationType.PRODUCT_REACTIVATED,
            "Product Reactivated",
            f'Your product "{event.name}" is live on the marketplace again.',
            f"/products/{event.product_id}",
            "View Product",
        )

    async def _product_restored(self, uow, event: ProductRestored):
        return await self._product_notification(
            uow, event,
            NotificationType.PRODUCT_RESTORED,
            "Product Back Under Review",
            f'Your product "{event.name}" has been returned to the review queue.',
            f"/products/edit/{event.product_id}",
            "Edit Product",
        )

    async def _inquiry_approved(self, uow, event: InquiryApproved):
        user_id = await self._supplier_user_id(uow, event.supplier_id)
        if user_id is None:
            return None
        return Notification(
            user_id=user_id,
            type=NotificationType.INQUIRY_RECEIVED,
            title="New Inquiry Received",
            message=f'You have received a new inquiry: "{event.subject}"',
            action_url="/supplier/inquiries",
            action_text="View Inquiry",
        )

    async def _inquiry_rejected(self, uow, event: InquiryRejected):
        buyer = await uow.buyers.get_by_id(event.buyer_id)
        if buyer is None:
            logger.warning("Buyer %s vanished before its notification was written", event.buyer_id)
            return None
        return Notification(
            user_id=buyer.user_id,
            type=NotificationType.INQUIRY_REJECTED,
            title="Inquiry Not Approved",
            message=f'Your inquiry "{event.subject}" was not approved. Reason: {event.reason}',
            action_url="/buyer/inquiries",
            action_text="View Inquiries",
        )
