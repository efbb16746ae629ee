import pytest
from pydantic import ValidationError

from tradeconnect.application.dtos.catalog_dtos import ProductCreateDto, ProductFilters, ProductUpdateDto
from tradeconnect.application.use_cases.engagement_use_cases import EngagementUseCase
from tradeconnect.application.use_cases.product_moderation import ProductModerationUseCase
from tradeconnect.application.use_cases.product_use_cases import PublicCatalogUseCase, SupplierProductUseCase
from tradeconnect.application.use_cases.supplier_moderation import SupplierModerationUseCase
from tradeconnect.domain.enums import (
    AdminNotificationType,
    NotificationType,
    ProductSort,
    ProductStatus,
)
from tradeconnect.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    InvalidTransitionError,
    PermissionDeniedError,
)


def supplier_products(market):
    return SupplierProductUseCase(market.uow(), market.dispatcher)


def moderation(market):
    return ProductModerationUseCase(market.uow(), market.dispatcher)


def catalog(market):
    return PublicCatalogUseCase(market.uow())


class TestSupplierProducts:

    @pytest.mark.asyncio
    async def test_create_enters_review_and_alerts_admin(self, market):
        """Test a new product waits for review and the admin is told."""
        user_id, supplier_id = await market.supplier()

        response = await supplier_products(market).create(user_id, ProductCreateDto(name="Raw silk", price=10))

        assert response.status == ProductStatus.PENDING
        assert response.supplier_id == supplier_id
        alerts = await market.list_by("admin_notifications", type=AdminNotificationType.NEW_PRODUCT)
        assert [a.related_id for a in alerts] == [response.id]

    @pytest.mark.asyncio
    async def test_create_counts_category(self, market):
        """Test the category counter goes up on create and down on hard delete."""
        user_id, _ = await market.supplier()
        category_id = await market.category()

        product_id = await market.product(user_id, category_id=category_id)
        assert (await market.get("categories", category_id)).product_count == 1

        await supplier_products(market).soft_delete(user_id, product_id)
        assert (await market.get("categories", category_id)).product_count == 1

        await moderation(market).hard_delete(product_id)
        assert (await market.get("categories", category_id)).product_count == 0

    @pytest.mark.asyncio
    async def test_unknown_category(self, market):
        """Test a product cannot reference a missing category."""
        user_id, _ = await market.supplier()

        with pytest.raises(DomainValidationError):
            await supplier_products(market).create(user_id, ProductCreateDto(name="Raw silk", category_id=42))
        assert await market.list_by("products") == []

    @pytest.mark.asyncio
    async def test_draft_then_publish(self, market):
        """Test drafts only reach the admin once published."""
        user_id, _ = await market.supplier()

        draft = await supplier_products(market).create(user_id, ProductCreateDto(name="Raw silk"), as_draft=True)
        assert draft.status == ProductStatus.DRAFT
        assert await market.list_by("admin_notifications", type=AdminNotificationType.NEW_PRODUCT) == []
        drafts = await supplier_products(market).list_by_status(user_id, ProductStatus.DRAFT)
        assert [d.id for d in drafts] == [draft.id]

        published = await supplier_products(market).publish(user_id, draft.id)

        assert published.status == ProductStatus.PENDING
        assert len(await market.list_by("admin_notifications", type=AdminNotificationType.NEW_PRODUCT)) == 1

    @pytest.mark.asyncio
    async def test_edit_resets_approved_product_to_pending(self, market):
        """Test editing an approved product sends it back for review."""
        user_id, _ = await market.supplier()
        product_id = await market.product(user_id)

        response = await supplier_products(market).edit(user_id, product_id, ProductUpdateDto(price=15.0))

        assert response.status == ProductStatus.PENDING
        assert response.price == 15.0
        assert await catalog(market).list_products() == []

    @pytest.mark.asyncio
    async def test_cannot_edit_other_suppliers_product(self, market):
        """Test ownership is enforced on edit."""
        owner_id, _ = await market.supplier("a@example.com", "Alpha")
        other_id, _ = await market.supplier("b@example.com", "Beta")
        product_id = await market.product(owner_id)

        with pytest.raises(PermissionDeniedError):
            await supplier_products(market).edit(other_id, product_id, ProductUpdateDto(name="Stolen"))

    @pytest.mark.asyncio
    async def test_suspended_supplier_cannot_create(self, market):
        """Test a suspended supplier cannot add products."""
        user_id, supplier_id = await market.supplier()
        await SupplierModerationUseCase(market.uow(), market.dispatcher).suspend(
            supplier_id, market.admin_id, "Chargebacks"
        )

        with pytest.raises(PermissionDeniedError):
            await supplier_products(market).create(user_id, ProductCreateDto(name="Raw silk"))

    @pytest.mark.asyncio
    async def test_soft_delete_and_recover(self, market):
        """Test a recovered product goes back to review."""
        user_id, _ = await market.supplier()
        product_id = await market.product(user_id)

        deleted = await supplier_products(market).soft_delete(user_id, product_id)
        assert deleted.status == ProductStatus.DELETED
        assert deleted.deleted_by == user_id
        assert await supplier_products(market).list_products(user_id) == []
        assert len(await supplier_products(market).list_products(user_id, include_deleted=True)) == 1

        recovered = await supplier_products(market).recover(user_id, product_id)

        assert recovered.status == ProductStatus.PENDING
        assert recovered.deleted_at is None

    def test_update_cannot_null_required_fields(self):
        """Test null is refused for fields the product requires, allowed for optional ones."""
        for field in ("name", "images", "certifications"):
            with pytest.raises(ValidationError):
                ProductUpdateDto(**{field: None})

        assert ProductUpdateDto(description=None).model_dump(exclude_unset=True) == {"description": None}
        assert ProductUpdateDto().model_dump(exclude_unset=True) == {}


class TestProductModeration:

    @pytest.mark.asyncio
    async def test_approve_notifies_supplier(self, market):
        """Test approval publishes the product and notifies its supplier."""
        user_id, _ = await market.supplier()
        product_id = await market.product(user_id, name="Raw silk", approve=False)

        response = await moderation(market).approve(product_id, market.admin_id, "Great photos")

        assert response.status == ProductStatus.APPROVED
        assert response.reviewed_by == market.admin_id
        assert response.review_notes == "Great photos"
        notifications = await market.list_by(
            "notifications", user_id=user_id, type=NotificationType.PRODUCT_APPROVED
        )
        assert len(notifications) == 1
        assert notifications[0].title == "Product Approved"
        assert notifications[0].message == (
            'Your product "Raw silk" has been approved and is now live on the marketplace.'
        )
        assert notifications[0].action_url == f"/products/{product_id}"

    @pytest.mark.asyncio
    async def test_reject_and_restore(self, market):
        """Test a restored product is back in the queue without rejection data."""
        user_id, _ = await market.supplier()
        product_id = await market.product(user_id, approve=False)

        rejected = await moderation(market).reject(product_id, market.admin_id, "Blurry photos")
        assert rejected.rejection_reason == "Blurry photos"

        restored = await moderation(market).restore(product_id, market.admin_id)

        assert restored.status == ProductStatus.PENDING
        assert restored.rejection_reason is None
        assert restored.restored_by == market.admin_id

    @pytest.mark.asyncio
    async def test_suspend_and_unsuspend(self, market):
        """Test suspension hides the product until lifted."""
        user_id, _ = await market.supplier()
        product_id = await market.product(user_id)

        await moderation(market).suspend(product_id, market.admin_id, "Counterfeit report")
        assert await catalog(market).list_products() == []

        response = await moderation(market).unsuspend(product_id)

        assert response.status == ProductStatus.APPROVED
        assert [p.id for p in await catalog(market).list_products()] == [product_id]

    @pytest.mark.asyncio
    async def test_approve_approved_product(self, market):
        """Test approving twice is an invalid transition."""
        user_id, _ = await market.supplier()
        product_id = await market.product(user_id)

        with pytest.raises(InvalidTransitionError):
            await moderation(market).approve(product_id, market.admin_id)

    @pytest.mark.asyncio
    async def test_admin_queues(self, market):
        """Test the admin listing carries supplier and category names."""
        user_id, _ = await market.supplier()
        category_id = await market.category("Silk")
        pending_id = await market.product(user_id, name="Pending silk", approve=False, category_id=category_id)
        await market.product(user_id, name="Approved silk")

        pending = await moderation(market).list_products(ProductStatus.PENDING)

        assert [p.id for p in pending] == [pending_id]
        assert pending[0].supplier_name == "Silk Road Textiles"
        assert pending[0].category_name == "Silk"
        assert len(await moderation(market).list_products()) == 2

    @pytest.mark.asyncio
    async def test_hard_delete_removes_saved_entries(self, market):
        """Test a hard delete also removes saves of the product."""
        user_id, _ = await market.supplier()
        buyer_user_id, _ = await market.buyer()
        product_id = await market.product(user_id)
        await EngagementUseCase(market.uow()).save_product(buyer_user_id, product_id)

        removed = await moderation(market).hard_delete(product_id)

        assert removed == 2
        assert await market.get("products", product_id) is None
        assert await market.list_by("saved_products") == []


class TestPublicCatalog:

    @pytest.mark.asyncio
    async def test_only_approved_products_are_public(self, market):
        """Test drafts, pending, rejected and deleted products never show."""
        user_id, _ = await market.supplier()
        approved = await market.product(user_id, name="Approved")
        await market.product(user_id, name="Pending", approve=False)
        rejected = await market.product(user_id, name="Rejected", approve=False)
        await moderation(market).reject(rejected, market.admin_id)
        await supplier_products(market).create(user_id, ProductCreateDto(name="Draft"), as_draft=True)

        listed = await catalog(market).list_products()

        assert [p.id for p in listed] == [approved]
        assert all(p.status == ProductStatus.APPROVED for p in listed)

    @pytest.mark.asyncio
    async def test_hidden_supplier_hides_products(self, market):
        """Test products of a suspended supplier disappear from the catalog."""
        user_id, supplier_id = await market.supplier()
        product_id = await market.product(user_id)
        await SupplierModerationUseCase(market.uow(), market.dispatcher).suspend(
            supplier_id, market.admin_id, "Chargebacks"
        )

        assert await catalog(market).list_products() == []
        with pytest.raises(EntityNotFoundError):
            await catalog(market).get_product(product_id)

    @pytest.mark.asyncio
    async def test_filters_and_sorting(self, market):
        """Test search, price range and price sorting."""
        user_id, _ = await market.supplier()
        cheap = await market.product(user_id, name="Cotton yarn", price=2.0)
        mid = await market.product(user_id, name="Cotton fabric", price=8.0)
        await market.product(user_id, name="Silk scarf", price=30.0)

        found = await catalog(market).list_products(ProductFilters(
            search="cotton", max_price=10, sort_by=ProductSort.PRICE_DESC
        ))

        assert [p.id for p in found] == [mid, cheap]

    @pytest.mark.asyncio
    async def test_product_page_counts_views(self, market):
        """Test each public view increments the counter."""
        user_id, _ = await market.supplier()
        product_id = await market.product(user_id)

        await catalog(market).get_product(product_id)
        response = await catalog(market).get_product(product_id)

        assert response.views == 2

    @pytest.mark.asyncio
    async def test_pending_product_page_is_not_found(self, market):
        """Test unapproved products have no public page."""
        user_id, _ = await market.supplier()
        product_id = await market.product(user_id, approve=False)

        with pytest.raises(EntityNotFoundError):
            await catalog(market).get_product(product_id)
