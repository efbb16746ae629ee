import pytest

from tradeconnect.domain.enums import UserRole


class TestHealthAndAuth:

    @pytest.mark.asyncio
    async def test_health(self, client):
        """Test the health endpoint."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["storage"] == "memory"

    @pytest.mark.asyncio
    async def test_register(self, client):
        """Test registration creates an unverified account."""
        response = await client.post("/api/auth/register", json={
            "email": "buyer@example.com",
            "password": "secret123",
            "role": "buyer",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["email"] == "buyer@example.com"
        assert body["user"]["email_verified"] is False
        assert body["email_status"] == "sent"

    @pytest.mark.asyncio
    async def test_register_admin_is_refused(self, client):
        """Test the admin role cannot be chosen at registration."""
        response = await client.post("/api/auth/register", json={
            "email": "sneaky@example.com",
            "password": "secret123",
            "role": "admin",
        })

        assert response.status_code == 400
        assert "message" in response.json()

    @pytest.mark.asyncio
    async def test_validation_error_shape(self, client):
        """Test request validation errors use the message body."""
        response = await client.post("/api/auth/register", json={"email": "not-an-email", "password": "x"})

        assert response.status_code == 400
        assert response.json()["message"]

    @pytest.mark.asyncio
    async def test_login_requires_verification(self, client, market):
        """Test an unverified login carries the verification hint."""
        await market.register("late@example.com", UserRole.BUYER, verify=False)

        response = await client.post("/api/auth/login", json={
            "email": "late@example.com",
            "password": "secret123",
        })

        assert response.status_code == 401
        body = response.json()
        assert body["requires_verification"] is True
        assert body["email"] == "late@example.com"
        assert "verify" in body["message"]

    @pytest.mark.asyncio
    async def test_login_success(self, client, market):
        """Test a verified buyer signs in."""
        await market.register("buyer@example.com", UserRole.BUYER)

        response = await client.post("/api/auth/login", json={
            "email": "buyer@example.com",
            "password": "secret123",
        })

        assert response.status_code == 200
        assert response.json()["user"]["role"] == "buyer"

    @pytest.mark.asyncio
    async def test_verify_email_link(self, client, market):
        """Test the verification link activates the account."""
        user_id = await market.register("late@example.com", UserRole.BUYER, verify=False)
        token = await market.verification_token(user_id)

        response = await client.get("/api/auth/verify-email", params={"token": token})

        assert response.status_code == 200
        assert (await market.get("users", user_id)).email_verified is True

    @pytest.mark.asyncio
    async def test_missing_header(self, client):
        """Test requests without the user-id header are unauthorized."""
        response = await client.get("/api/auth/user")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}

    @pytest.mark.asyncio
    async def test_unknown_user_header(self, client, market, headers_for):
        """Test an id with no account is unauthorized."""
        response = await client.get("/api/auth/user", headers=headers_for(9999))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_admin_routes_need_admin(self, client, market, headers_for):
        """Test a buyer is refused on admin routes."""
        buyer_user, _ = await market.buyer()

        response = await client.get("/api/admin/stats", headers=headers_for(buyer_user))

        assert response.status_code == 403
        assert response.json() == {"message": "Admin access required"}

    @pytest.mark.asyncio
    async def test_supplier_routes_need_supplier(self, client, market, headers_for):
        """Test a buyer cannot manage products."""
        buyer_user, _ = await market.buyer()

        response = await client.post("/api/products/", json={"name": "Silk"}, headers=headers_for(buyer_user))

        assert response.status_code == 403
        assert response.json()["message"] == "Supplier access required"


class TestModerationOverHttp:

    @pytest.mark.asyncio
    async def test_supplier_approval(self, client, market, admin_headers):
        """Test approving a supplier and the conflict on a second approval."""
        _, supplier_id = await market.supplier(approve=False)

        pending = await client.get("/api/admin/suppliers/pending", headers=admin_headers)
        assert [s["id"] for s in pending.json()] == [supplier_id]

        response = await client.post(f"/api/admin/suppliers/{supplier_id}/approve", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["status"] == "active"
        assert response.json()["verified"] is True

        again = await client.post(f"/api/admin/suppliers/{supplier_id}/approve", headers=admin_headers)
        assert again.status_code == 409
        assert "message" in again.json()

    @pytest.mark.asyncio
    async def test_unknown_supplier(self, client, market, admin_headers):
        """Test moderating a missing supplier is not found."""
        response = await client.post("/api/admin/suppliers/999/approve", headers=admin_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_product_review_and_catalog(self, client, market, admin_headers, headers_for):
        """Test a product becomes public once approved."""
        supplier_user, _ = await market.supplier()

        created = await client.post(
            "/api/products/",
            json={"name": "Raw silk", "price": 12.5, "images": ["silk.jpg"]},
            headers=headers_for(supplier_user),
        )
        assert created.status_code == 201
        product_id = created.json()["id"]
        assert created.json()["status"] == "pending"
        assert (await client.get("/api/products/")).json() == []

        approved = await client.post(f"/api/admin/products/{product_id}/approve", headers=admin_headers)
        assert approved.status_code == 200

        listed = await client.get("/api/products/")
        assert [p["id"] for p in listed.json()] == [product_id]
        assert listed.json()[0]["images"] == ["silk.jpg"]

    @pytest.mark.asyncio
    async def test_unknown_product(self, client):
        """Test a missing product page is not found."""
        response = await client.get("/api/products/999")

        assert response.status_code == 404
        assert "message" in response.json()

    @pytest.mark.asyncio
    async def test_inquiry_flow(self, client, market, admin_headers, headers_for):
        """Test an inquiry reaches the supplier only after approval."""
        supplier_user, supplier_id = await market.supplier()
        buyer_user, _ = await market.buyer()

        created = await client.post(
            "/api/inquiries/",
            json={"supplier_id": supplier_id, "subject": "Bulk order", "message": "500m please"},
            headers=headers_for(buyer_user),
        )
        assert created.status_code == 201
        inquiry_id = created.json()["id"]

        inbox = await client.get("/api/inquiries/supplier", headers=headers_for(supplier_user))
        assert inbox.json() == []

        approved = await client.post(f"/api/admin/inquiries/{inquiry_id}/approve", headers=admin_headers)
        assert approved.json()["admin_approval_status"] == "approved"

        inbox = await client.get("/api/inquiries/supplier", headers=headers_for(supplier_user))
        assert [i["id"] for i in inbox.json()] == [inquiry_id]
        assert inbox.json()[0]["product_name"] == "General Inquiry"

        reply = await client.post(
            f"/api/inquiries/{inquiry_id}/reply",
            json={"reply": "We can ship in May"},
            headers=headers_for(supplier_user),
        )
        assert reply.status_code == 200
        assert reply.json()["status"] == "replied"

    @pytest.mark.asyncio
    async def test_category_delete_guard(self, client, market, admin_headers):
        """Test a category with subcategories cannot be deleted."""
        parent = await client.post("/api/admin/categories", json={"name": "Textiles"}, headers=admin_headers)
        assert parent.status_code == 201
        parent_id = parent.json()["id"]
        await client.post(
            "/api/admin/categories", json={"name": "Silk", "parent_id": parent_id}, headers=admin_headers
        )

        response = await client.delete(f"/api/admin/categories/{parent_id}", headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Cannot delete a category that has subcategories"}


class TestNotificationsOverHttp:

    @pytest.mark.asyncio
    async def test_unread_count_and_delete(self, client, market, headers_for):
        """Test the unread counter and deleting a notification."""
        buyer_user, _ = await market.buyer()
        headers = headers_for(buyer_user)

        count = await client.get("/api/notifications/unread-count", headers=headers)
        assert count.status_code == 200
        assert count.json()["count"] == 1

        notifications = await client.get("/api/notifications/", headers=headers)
        notification_id = notifications.json()[0]["id"]

        deleted = await client.delete(f"/api/notifications/{notification_id}", headers=headers)
        assert deleted.status_code == 204

        count = await client.get("/api/notifications/unread-count", headers=headers)
        assert count.json()["count"] == 0

    @pytest.mark.asyncio
    async def test_foreign_notification(self, client, market, headers_for):
        """Test one user cannot delete another user's notification."""
        buyer_user, _ = await market.buyer()
        supplier_user, _ = await market.supplier()
        notifications = await client.get("/api/notifications/", headers=headers_for(buyer_user))
        notification_id = notifications.json()[0]["id"]

        response = await client.delete(f"/api/notifications/{notification_id}", headers=headers_for(supplier_user))

        assert response.status_code == 403


class TestUserApprovalOverHttp:

    @pytest.mark.asyncio
    async def test_pending_and_approve(self, client, market, admin_headers):
        """Test the admin approval queue and approving an account."""
        user_id = await market.register("shop@example.com", UserRole.BUYER, verify=False)

        pending = await client.get("/api/admin/users/pending", headers=admin_headers)
        assert pending.status_code == 200
        assert [u["id"] for u in pending.json()] == [user_id]

        approved = await client.post(f"/api/admin/users/{user_id}/approve", headers=admin_headers)
        assert approved.status_code == 200
        assert approved.json()["approved"] is True

        pending = await client.get("/api/admin/users/pending", headers=admin_headers)
        assert pending.json() == []

    @pytest.mark.asyncio
    async def test_reject_removes_account(self, client, market, admin_headers):
        """Test rejecting an account deletes it."""
        user_id = await market.register("shop@example.com", UserRole.BUYER, verify=False)

        response = await client.post(f"/api/admin/users/{user_id}/reject", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "User rejected and removed"
        assert await market.get("users", user_id) is None

    @pytest.mark.asyncio
    async def test_unknown_user(self, client, market, admin_headers):
        """Test approving a missing account is not found."""
        response = await client.post("/api/admin/users/999/approve", headers=admin_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_caller_header_is_not_the_target(self, client, market, headers_for):
        """Test the user-id header identifies the caller, not the account acted on."""
        buyer_user, _ = await market.buyer()
        pending_user = await market.register("shop@example.com", UserRole.BUYER, verify=False)

        response = await client.post(f"/api/admin/users/{pending_user}/approve", headers=headers_for(buyer_user))

        assert response.status_code == 403
        assert (await market.get("users", pending_user)).approved is False


class TestNullFieldsOverHttp:

    @pytest.mark.asyncio
    async def test_product_name_cannot_be_cleared(self, client, market, headers_for):
        """Test a null product name is refused and the product is unchanged."""
        supplier_user, _ = await market.supplier()
        product_id = await market.product(supplier_user, name="Raw silk")

        response = await client.put(
            f"/api/products/{product_id}", json={"name": None}, headers=headers_for(supplier_user)
        )

        assert response.status_code == 400
        assert "message" in response.json()
        product = await market.get("products", product_id)
        assert product.name == "Raw silk"
        assert (await client.get("/api/products/")).status_code == 200

    @pytest.mark.asyncio
    async def test_product_images_cannot_be_nulled(self, client, market, headers_for):
        """Test list fields reject null."""
        supplier_user, _ = await market.supplier()
        product_id = await market.product(supplier_user, images=["a.jpg"])

        response = await client.put(
            f"/api/products/{product_id}", json={"images": None}, headers=headers_for(supplier_user)
        )

        assert response.status_code == 400
        assert (await market.get("products", product_id)).images == ["a.jpg"]

    @pytest.mark.asyncio
    async def test_supplier_company_name_cannot_be_cleared(self, client, market, headers_for):
        """Test a null company name is refused and the profile is unchanged."""
        supplier_user, supplier_id = await market.supplier()

        response = await client.put("/api/suppliers/me", json={"company_name": None}, headers=headers_for(supplier_user))

        assert response.status_code == 400
        assert (await market.get("suppliers", supplier_id)).company_name == "Silk Road Textiles"
        assert (await client.get("/api/suppliers/", params={"search": "silk"})).status_code == 200

    @pytest.mark.asyncio
    async def test_buyer_company_name_cannot_be_cleared(self, client, market, headers_for):
        """Test the buyer profile keeps its company name."""
        buyer_user, buyer_id = await market.buyer()
        before = (await market.get("buyers", buyer_id)).company_name

        response = await client.put("/api/buyers/me", json={"company_name": None}, headers=headers_for(buyer_user))

        assert response.status_code == 400
        assert (await market.get("buyers", buyer_id)).company_name == before

    @pytest.mark.asyncio
    async def test_category_name_cannot_be_cleared(self, client, market, admin_headers):
        """Test a null category name is refused."""
        category_id = await market.category("Textiles")

        response = await client.put(
            f"/api/admin/categories/{category_id}", json={"name": None}, headers=admin_headers
        )

        assert response.status_code == 400
        assert (await market.get("categories", category_id)).name == "Textiles"
