import pytest

from tradeconnect.application.use_cases.auth_use_cases import UserApprovalUseCase
from tradeconnect.application.use_cases.buyer_use_cases import BuyerModerationUseCase
from tradeconnect.application.use_cases.engagement_use_cases import EngagementUseCase
from tradeconnect.application.use_cases.product_use_cases import PublicCatalogUseCase
from tradeconnect.core.config import Settings
from tradeconnect.domain.entities.category import Category
from tradeconnect.domain.entities.user import User
from tradeconnect.domain.enums import InquiryApprovalStatus, NotificationType, UserRole
from tradeconnect.infrastructure.container import build_container
from tradeconnect.infrastructure.repositories.memory.store import MemoryStore
from tradeconnect.infrastructure.repositories.memory.unit_of_work import MemoryUnitOfWork


class TestMemoryUnitOfWork:

    @pytest.mark.asyncio
    async def test_rollback_restores_snapshot(self):
        """Test an exception inside the block discards its writes."""
        store = MemoryStore()

        with pytest.raises(ValueError):
            async with MemoryUnitOfWork(store) as uow:
                await uow.categories.add(Category(name="Textiles"))
                raise ValueError("abort")

        async with MemoryUnitOfWork(store) as uow:
            assert await uow.categories.list_all() == []

    @pytest.mark.asyncio
    async def test_entities_are_detached(self):
        """Test mutating a loaded entity does not change storage until update."""
        store = MemoryStore()
        async with MemoryUnitOfWork(store) as uow:
            category = await uow.categories.add(Category(name="Textiles"))

        async with MemoryUnitOfWork(store) as uow:
            loaded = await uow.categories.get_by_id(category.id)
            loaded.name = "Changed"
            assert (await uow.categories.get_by_id(category.id)).name == "Textiles"
            await uow.categories.update(loaded)
            assert (await uow.categories.get_by_id(category.id)).name == "Changed"

    @pytest.mark.asyncio
    async def test_ids_are_sequential_per_table(self):
        """Test each table has its own id sequence."""
        store = MemoryStore()
        async with MemoryUnitOfWork(store) as uow:
            first = await uow.categories.add(Category(name="A"))
            second = await uow.categories.add(Category(name="B"))
            user = await uow.users.add(User(email="a@example.com", password_hash="x", role=UserRole.BUYER))

        assert (first.id, second.id, user.id) == (1, 2, 1)


class TestContainer:

    def test_unknown_backend(self):
        """Test an unsupported backend name is refused."""
        with pytest.raises(ValueError):
            build_container(Settings(STORAGE_BACKEND="redis"))

    def test_memory_backend_has_no_engine(self, container):
        """Test the memory container carries no database engine."""
        assert container.engine is None
        assert isinstance(container.unit_of_work_factory(), MemoryUnitOfWork)


class TestSqlBackend:

    @pytest.mark.asyncio
    async def test_moderation_flow(self, sql_market):
        """Test the supplier, product and inquiry flow against SQLite."""
        supplier_user, supplier_id = await sql_market.supplier()
        buyer_user, buyer_id = await sql_market.buyer()
        category_id = await sql_market.category("Silk")
        product_id = await sql_market.product(
            supplier_user, category_id=category_id, images=["a.jpg"], certifications=["OEKO-TEX"]
        )
        inquiry_id = await sql_market.inquiry(buyer_user, supplier_id, product_id)

        listed = await PublicCatalogUseCase(sql_market.uow()).list_products()
        assert [p.id for p in listed] == [product_id]
        assert listed[0].images == ["a.jpg"]
        assert listed[0].certifications == ["OEKO-TEX"]
        assert (await sql_market.get("categories", category_id)).product_count == 1
        inquiry = await sql_market.get("inquiries", inquiry_id)
        assert inquiry.admin_approval_status == InquiryApprovalStatus.APPROVED
        received = await sql_market.list_by(
            "notifications", user_id=supplier_user, type=NotificationType.INQUIRY_RECEIVED
        )
        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_buyer_cascade(self, sql_market):
        """Test hard deleting a buyer removes owned rows in SQLite."""
        _, supplier_id = await sql_market.supplier()
        buyer_user, buyer_id = await sql_market.buyer()
        await sql_market.inquiry(buyer_user, supplier_id)

        await BuyerModerationUseCase(sql_market.uow()).delete(buyer_id)

        assert await sql_market.get("users", buyer_user) is None
        assert await sql_market.list_by("inquiries", buyer_id=buyer_id) == []
        assert await sql_market.list_by("notifications", user_id=buyer_user) == []
        assert await sql_market.get("suppliers", supplier_id) is not None

    @pytest.mark.asyncio
    async def test_rollback_on_error(self, sql_market):
        """Test an exception rolls the session back."""
        with pytest.raises(RuntimeError):
            async with sql_market.uow() as uow:
                await uow.categories.add(Category(name="Temporary"))
                raise RuntimeError("abort")

        assert await sql_market.list_by("categories", name="Temporary") == []

    @pytest.mark.asyncio
    async def test_user_reject_cascade(self, sql_market):
        """Test rejecting a supplier account deletes its whole subtree in SQLite."""
        supplier_user, supplier_id = await sql_market.supplier()
        buyer_user, buyer_id = await sql_market.buyer()
        product_id = await sql_market.product(supplier_user)
        await EngagementUseCase(sql_market.uow()).save_product(buyer_user, product_id)
        await EngagementUseCase(sql_market.uow()).follow_supplier(buyer_user, supplier_id)
        await sql_market.inquiry(buyer_user, supplier_id, product_id)

        removed = await UserApprovalUseCase(sql_market.uow(), sql_market.dispatcher).reject(supplier_user)

        assert removed >= 6
        assert await sql_market.get("users", supplier_user) is None
        assert await sql_market.get("suppliers", supplier_id) is None
        assert await sql_market.get("products", product_id) is None
        assert await sql_market.list_by("saved_products", buyer_id=buyer_id) == []
        assert await sql_market.list_by("followed_suppliers", buyer_id=buyer_id) == []
        assert await sql_market.list_by("inquiries", supplier_id=supplier_id) == []
        assert await sql_market.list_by("notifications", user_id=supplier_user) == []
        assert await sql_market.get("buyers", buyer_id) is not None
