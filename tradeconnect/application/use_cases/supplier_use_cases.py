"""Supplier self-service: profile, onboarding draft and submission, directory"""

import json
import logging
from typing import Any, List, Optional

from ...domain.enums import SupplierStatus
from ...domain.exceptions import EntityNotFoundError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.profile_dtos import OnboardingSubmissionDto, SupplierProfileUpdateDto, SupplierResponse
from .common import supplier_for_user

logger = logging.getLogger(__name__)


class SupplierProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def get_profile(self, user_id: int) -> SupplierResponse:
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
        return SupplierResponse.model_validate(supplier)

    async def update_profile(self, user_id: int, request: SupplierProfileUpdateDto) -> SupplierResponse:
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
            supplier.update_details(request.model_dump(exclude_unset=True))
            await self.unit_of_work.suppliers.update(supplier)
            await self.unit_of_work.commit()
        return SupplierResponse.model_validate(supplier)

    async def save_draft(self, user_id: int, draft: Any) -> SupplierResponse:
        """Store the onboarding wizard state without touching the review status"""
        if not isinstance(draft, str):
            draft = json.dumps(draft)
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
            supplier.save_draft(draft)
            await self.unit_of_work.suppliers.update(supplier)
            await self.unit_of_work.commit()
        return SupplierResponse.model_validate(supplier)

    async def submit_onboarding(self, user_id: int, request: OnboardingSubmissionDto) -> SupplierResponse:
        async with self.unit_of_work:
            supplier = await supplier_for_user(self.unit_of_work, user_id)
            supplier.submit_onboarding(request.model_dump(exclude_unset=True))
            await self.unit_of_work.suppliers.update(supplier)
            await self.unit_of_work.commit()

        logger.info("Supplier %s submitted onboarding for review", supplier.id)
        return SupplierResponse.model_validate(supplier)


class SupplierDirectoryUseCase:
    """Public supplier listing: active suppliers only"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def list_suppliers(self, search: Optional[str] = None, location: Optional[str] = None) -> List[SupplierResponse]:
        async with self.unit_of_work:
            suppliers = await self.unit_of_work.suppliers.list_by(status=SupplierStatus.ACTIVE)

        if search:
            needle = search.lower()
            suppliers = [
                s for s in suppliers
                if needle in s.company_name.lower() or needle in (s.description or "").lower()
            ]
        if location:
            needle = location.lower()
            suppliers = [s for s in suppliers if needle in (s.location or "").lower()]

        return [SupplierResponse.model_validate(s) for s in suppliers]

    async def get_supplier(self, supplier_id: int) -> SupplierResponse:
        async with self.unit_of_work:
            supplier = await self.unit_of_work.suppliers.get_by_id(supplier_id)
        if supplier is None or not supplier.is_listed:
            raise EntityNotFoundError("Supplier", supplier_id)
        return SupplierResponse.model_validate(supplier)
