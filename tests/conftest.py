import os

# Cheap hashing and the in-memory backend for every test; must be set before
# tradeconnect reads its settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest
from httpx import ASGITransport, AsyncClient

from tradeconnect.application.dtos.auth_dtos import RegisterUserDto
from tradeconnect.application.dtos.catalog_dtos import CategoryCreateDto, ProductCreateDto
from tradeconnect.application.dtos.inquiry_dtos import InquiryCreateDto
from tradeconnect.application.dtos.profile_dtos import OnboardingSubmissionDto
from tradeconnect.application.use_cases.auth_use_cases import (
    RegisterUserUseCase,
    SeedAdminUseCase,
    VerifyEmailUseCase,
)
from tradeconnect.application.use_cases.category_use_cases import CategoryUseCase
from tradeconnect.application.use_cases.inquiry_moderation import InquiryModerationUseCase
from tradeconnect.application.use_cases.inquiry_use_cases import InquiryUseCase
from tradeconnect.application.use_cases.product_moderation import ProductModerationUseCase
from tradeconnect.application.use_cases.product_use_cases import SupplierProductUseCase
from tradeconnect.application.use_cases.supplier_moderation import SupplierModerationUseCase
from tradeconnect.application.use_cases.supplier_use_cases import SupplierProfileUseCase
from tradeconnect.core.config import Settings
from tradeconnect.db.database import create_tables
from tradeconnect.domain.enums import UserRole
from tradeconnect.infrastructure.container import build_container
from tradeconnect.main import create_app

PASSWORD = "secret123"


class Marketplace:
    """Seeds users, profiles, products and inquiries through the use cases."""

    def __init__(self, container):
        self.container = container
        self.dispatcher = container.dispatcher
        self.admin_id = None

    def uow(self):
        return self.container.unit_of_work_factory()

    async def seed_admin(self, email="admin@tradeconnect.app"):
        admin = await SeedAdminUseCase(self.uow()).execute(email, "adminpass")
        self.admin_id = admin.id
        return admin.id

    async def register(self, email, role=UserRole.BUYER, verify=True):
        use_case = RegisterUserUseCase(
            self.uow(), self.container.email_service, self.dispatcher, self.container.config
        )
        response = await use_case.execute(RegisterUserDto(email=email, password=PASSWORD, role=role))
        if verify:
            await VerifyEmailUseCase(self.uow(), self.dispatcher).execute(
                await self.verification_token(response.user.id)
            )
        return response.user.id

    async def verification_token(self, user_id):
        async with self.uow() as uow:
            user = await uow.users.get_by_id(user_id)
        return user.email_verification_token

    async def get(self, repository, entity_id):
        async with self.uow() as uow:
            return await getattr(uow, repository).get_by_id(entity_id)

    async def list_by(self, repository, **criteria):
        async with self.uow() as uow:
            return await getattr(uow, repository).list_by(**criteria)

    async def supplier(self, email="supplier@example.com", company="Silk Road Textiles", approve=True):
        """Registered supplier that finished onboarding; returns (user_id, supplier_id)"""
        user_id = await self.register(email, UserRole.SUPPLIER)
        await SupplierProfileUseCase(self.uow()).submit_onboarding(user_id, OnboardingSubmissionDto(
            company_name=company,
            description="Cotton and silk fabrics",
            location="Tashkent, Uzbekistan",
            agrees_to_terms=True,
            agrees_to_privacy=True,
            declares_info_accurate=True,
        ))
        async with self.uow() as uow:
            supplier = await uow.suppliers.get_by_user_id(user_id)
        if approve:
            await SupplierModerationUseCase(self.uow(), self.dispatcher).approve(supplier.id)
        return user_id, supplier.id

    async def buyer(self, email="buyer@example.com"):
        """Registered, verified buyer; returns (user_id, buyer_id)"""
        user_id = await self.register(email, UserRole.BUYER)
        async with self.uow() as uow:
            buyer = await uow.buyers.get_by_user_id(user_id)
        return user_id, buyer.id

    async def category(self, name="Textiles", parent_id=None):
        response = await CategoryUseCase(self.uow()).create(
            CategoryCreateDto(name=name, parent_id=parent_id), self.admin_id
        )
        return response.id

    async def product(self, supplier_user_id, name="Raw silk", approve=True, **fields):
        fields.setdefault("price", 12.5)
        response = await SupplierProductUseCase(self.uow(), self.dispatcher).create(
            supplier_user_id, ProductCreateDto(name=name, **fields)
        )
        if approve:
            await ProductModerationUseCase(self.uow(), self.dispatcher).approve(response.id, self.admin_id)
        return response.id

    async def inquiry(self, buyer_user_id, supplier_id, product_id=None, approve=True, subject="Bulk order"):
        response = await InquiryUseCase(self.uow(), self.dispatcher).create(buyer_user_id, InquiryCreateDto(
            supplier_id=supplier_id,
            product_id=product_id,
            subject=subject,
            message="Can you ship 500 metres to Almaty?",
            quantity=500,
        ))
        if approve:
            await InquiryModerationUseCase(self.uow(), self.dispatcher).approve(response.id, self.admin_id)
        return response.id


@pytest.fixture
def test_settings():
    """Settings for an isolated in-memory marketplace."""
    return Settings(
        STORAGE_BACKEND="memory",
        TESTING=True,
        BCRYPT_ROUNDS=4,
        EMAIL_DELIVERY_ENABLED=False,
        ADMIN_EMAIL=None,
        ADMIN_PASSWORD=None,
    )


@pytest.fixture
def container(test_settings):
    """Fresh storage for each test."""
    return build_container(test_settings)


@pytest.fixture
def dispatcher(container):
    return container.dispatcher


@pytest.fixture
def uow_factory(container):
    return container.unit_of_work_factory


@pytest.fixture
async def market(container):
    """Marketplace with a seeded administrator."""
    marketplace = Marketplace(container)
    await marketplace.seed_admin()
    return marketplace


@pytest.fixture
def app(container):
    return create_app(container)


@pytest.fixture
async def client(app):
    """Create a test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


def _headers_for(user_id):
    return {"user-id": str(user_id)}


@pytest.fixture
def headers_for():
    """Build the user-id header the API authenticates with."""
    return _headers_for


@pytest.fixture
def admin_headers(market):
    """Headers for the seeded admin."""
    return _headers_for(market.admin_id)


@pytest.fixture
async def sql_market():
    """Marketplace on an in-memory SQLite database."""
    sql_container = build_container(Settings(STORAGE_BACKEND="sql", TESTING=True, BCRYPT_ROUNDS=4))
    create_tables(sql_container.engine)
    marketplace = Marketplace(sql_container)
    await marketplace.seed_admin()
    yield marketplace
    sql_container.engine.dispose()
