"""Admin moderation of supplier profiles"""

import logging
from typing import Callable, List, Optional

from ...domain.entities.supplier import SupplierProfile
from ...domain.enums import SupplierStatus
from ...domain.exceptions import DomainValidationError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.profile_dtos import SupplierAdminResponse, SupplierResponse
from ..event_dispatcher import EventDispatcher
from .common import get_or_raise

logger = logging.getLogger(__name__)


class SupplierModerationUseCase:
    """Approve, reject, suspend, activate, delete and restore suppliers.

    Every action loads the profile, applies the entity transition (which
    validates it against the supplier transition table), commits, and then
    dispatches the resulting events.
    """

    def __init__(self, unit_of_work: IUnitOfWork, dispatcher: EventDispatcher):
        self.unit_of_work = unit_of_work
        self.dispatcher = dispatcher

    async def _transition(self, supplier_id: int, action: Callable[[SupplierProfile], None]) -> SupplierResponse:
        async with self.unit_of_work:
            supplier = await get_or_raise(self.unit_of_work.suppliers, supplier_id, "Supplier")
            previous = supplier.status
            action(supplier)
            await self.unit_of_work.suppliers.update(supplier)
            await self.unit_of_work.commit()

        logger.info("Supplier %s: %s -> %s", supplier_id, previous.value, supplier.status.value)
        await self.dispatcher.dispatch(supplier.get_events())
        return SupplierResponse.model_validate(supplier)

    async def approve(self, supplier_id: int) -> SupplierResponse:
        return await self._transition(supplier_id, lambda s: s.approve())

    async def reject(self, supplier_id: int, admin_id: int, reason: Optional[str] = None) -> SupplierResponse:
        return await self._transition(supplier_id, lambda s: s.reject(admin_id, reason))

    async def suspend(self, supplier_id: int, admin_id: int, reason: str) -> SupplierResponse:
        if not reason or not reason.strip():
            raise DomainValidationError("Suspension reason is required")
        return await self._transition(supplier_id, lambda s: s.suspend(admin_id, reason))

    async def activate(self, supplier_id: int) -> SupplierResponse:
        return await self._transition(supplier_id, lambda s: s.activate())

    async def delete(self, supplier_id: int, admin_id: int) -> SupplierResponse:
        return await self._transition(supplier_id, lambda s: s.delete(admin_id))

    async def restore(self, supplier_id: int) -> SupplierResponse:
        return await self._transition(supplier_id, lambda s: s.restore())

    # Admin queues

    async def _admin_view(self, supplier: SupplierProfile) -> SupplierAdminResponse:
        user = await self.unit_of_work.users.get_by_id(supplier.user_id)
        product_count = await self.unit_of_work.products.count_by(supplier_id=supplier.id)
        return SupplierAdminResponse.model_validate(supplier).model_copy(update={
            "product_count": product_count,
            "user_email": user.email if user else None,
            "email_verified": user.email_verified if user else None,
        })

    async def list_suppliers(self, status: Optional[SupplierStatus] = None) -> List[SupplierAdminResponse]:
        async with self.unit_of_work:
            if status is None:
                suppliers = await self.unit_of_work.suppliers.list_all()
            else:
                suppliers = await self.unit_of_work.suppliers.list_by(status=status)
            return [await self._admin_view(s) for s in suppliers]

    async def list_pending(self) -> List[SupplierAdminResponse]:
        """Suppliers that finished onboarding and wait for a decision"""
        async with self.unit_of_work:
            suppliers = await self.unit_of_work.suppliers.list_by(
                status=SupplierStatus.PENDING_APPROVAL,
                onboarding_completed=True,
                verified=False,
            )
            return [await self._admin_view(s) for s in suppliers]

    async def get_supplier(self, supplier_id: int) -> SupplierAdminResponse:
        async with self.unit_of_work:
            supplier = await get_or_raise(self.unit_of_work.suppliers, supplier_id, "Supplier")
            return await self._admin_view(supplier)
