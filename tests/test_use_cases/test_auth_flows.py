import pytest
from unittest.mock import AsyncMock

from tradeconnect.application.dtos.auth_dtos import LoginUserDto, RegisterUserDto, ResetPasswordDto
from tradeconnect.application.use_cases.auth_use_cases import (
    RESET_REQUESTED_MESSAGE,
    ForgotPasswordUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
    ResendVerificationUseCase,
    ResetPasswordUseCase,
    SeedAdminUseCase,
    UserApprovalUseCase,
    VerifyEmailUseCase,
)
from tradeconnect.domain.enums import AdminNotificationType, NotificationType, UserRole
from tradeconnect.domain.exceptions import (
    AccountPendingApprovalError,
    DomainValidationError,
    EmailNotVerifiedError,
    EntityNotFoundError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from tradeconnect.infrastructure.external_services.email_service import EmailResult

PASSWORD = "secret123"


def register_use_case(market, email_service=None):
    return RegisterUserUseCase(
        market.uow(),
        email_service or market.container.email_service,
        market.dispatcher,
        market.container.config,
    )


class TestRegistration:

    @pytest.mark.asyncio
    async def test_register_supplier_creates_profile_and_admin_alerts(self, market):
        """Test registration creates the user, an empty profile and admin notifications."""
        response = await register_use_case(market).execute(
            RegisterUserDto(email="Mill@Example.com", password=PASSWORD, role=UserRole.SUPPLIER)
        )

        assert response.user.email == "mill@example.com"
        assert response.user.approved is False
        assert response.user.email_verified is False
        assert response.email_status == "sent"

        suppliers = await market.list_by("suppliers", user_id=response.user.id)
        assert len(suppliers) == 1
        assert suppliers[0].company_name == f"Company {response.user.id}"

        alerts = await market.list_by("admin_notifications")
        assert {a.type for a in alerts} == {
            AdminNotificationType.NEW_USER_REGISTRATION,
            AdminNotificationType.NEW_SUPPLIER,
        }

    @pytest.mark.asyncio
    async def test_register_buyer_creates_buyer_profile(self, market):
        """Test buyers get a buyer profile."""
        response = await register_use_case(market).execute(
            RegisterUserDto(email="shop@example.com", password=PASSWORD)
        )

        assert response.user.role == UserRole.BUYER
        assert len(await market.list_by("buyers", user_id=response.user.id)) == 1
        assert await market.list_by("suppliers", user_id=response.user.id) == []

    @pytest.mark.asyncio
    async def test_verified_email_cannot_register_twice(self, market):
        """Test a verified address is taken."""
        await market.register("shop@example.com")

        with pytest.raises(UserAlreadyExistsError):
            await register_use_case(market).execute(
                RegisterUserDto(email="shop@example.com", password=PASSWORD)
            )

    @pytest.mark.asyncio
    async def test_unverified_registration_is_replaced(self, market):
        """Test an abandoned registration does not lock the address."""
        first = await market.register("shop@example.com", verify=False)

        second = await market.register("shop@example.com", role=UserRole.SUPPLIER, verify=False)

        assert second != first
        assert await market.get("users", first) is None
        assert await market.list_by("buyers", user_id=first) == []
        assert len(await market.list_by("suppliers", user_id=second)) == 1

    @pytest.mark.asyncio
    async def test_failed_email_still_registers(self, market):
        """Test a delivery failure is reported but the account exists."""
        email_service = AsyncMock()
        email_service.send_verification_email.return_value = EmailResult(
            success=False, error="Both email services failed. Brevo: down, SendGrid: down"
        )

        response = await register_use_case(market, email_service).execute(
            RegisterUserDto(email="shop@example.com", password=PASSWORD)
        )

        assert response.email_status == "failed"
        assert "Both email services failed" in response.email_error
        assert await market.get("users", response.user.id) is not None

    def test_admin_role_cannot_self_register(self):
        """Test the admin role is rejected at validation."""
        with pytest.raises(ValueError):
            RegisterUserDto(email="boss@example.com", password=PASSWORD, role=UserRole.ADMIN)


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_requires_verified_email(self, market):
        """Test unverified accounts are told to verify first."""
        await market.register("shop@example.com", verify=False)

        with pytest.raises(EmailNotVerifiedError) as exc_info:
            await LoginUserUseCase(market.uow()).execute(
                LoginUserDto(email="shop@example.com", password=PASSWORD)
            )
        assert exc_info.value.details == {"requires_verification": True, "email": "shop@example.com"}

    @pytest.mark.asyncio
    async def test_login_after_verification(self, market):
        """Test a verified account can sign in."""
        user_id = await market.register("shop@example.com")

        response = await LoginUserUseCase(market.uow()).execute(
            LoginUserDto(email="shop@example.com", password=PASSWORD)
        )

        assert response.user.id == user_id
        assert response.user.approved is True

    @pytest.mark.asyncio
    async def test_wrong_password(self, market):
        """Test a bad password is rejected without detail."""
        await market.register("shop@example.com")

        with pytest.raises(InvalidCredentialsError):
            await LoginUserUseCase(market.uow()).execute(
                LoginUserDto(email="shop@example.com", password="wrong-password")
            )

    @pytest.mark.asyncio
    async def test_unapproved_account(self, market):
        """Test a verified but unapproved account waits for the admin."""
        user_id = await market.register("shop@example.com")
        async with market.uow() as uow:
            user = await uow.users.get_by_id(user_id)
            user.approved = False
            await uow.users.update(user)

        with pytest.raises(AccountPendingApprovalError):
            await LoginUserUseCase(market.uow()).execute(
                LoginUserDto(email="shop@example.com", password=PASSWORD)
            )

    @pytest.mark.asyncio
    async def test_admin_login(self, market):
        """Test the seeded admin signs in."""
        response = await LoginUserUseCase(market.uow()).execute(
            LoginUserDto(email="admin@tradeconnect.app", password="adminpass")
        )
        assert response.user.role == UserRole.ADMIN


class TestEmailVerification:

    @pytest.mark.asyncio
    async def test_verify_notifies_user(self, market):
        """Test verification approves the account and notifies the user."""
        user_id = await market.register("shop@example.com", verify=False)
        token = await market.verification_token(user_id)

        response = await VerifyEmailUseCase(market.uow(), market.dispatcher).execute(token)

        assert response.success is True
        user = await market.get("users", user_id)
        assert user.email_verified is True
        assert user.approved is True
        notifications = await market.list_by("notifications", user_id=user_id)
        assert [n.type for n in notifications] == [NotificationType.USER_APPROVED]
        assert notifications[0].title == "Account Verified & Approved"
        assert notifications[0].action_url == "/buyer/dashboard"

    @pytest.mark.asyncio
    async def test_unknown_token(self, market):
        """Test an unknown token is rejected."""
        with pytest.raises(DomainValidationError):
            await VerifyEmailUseCase(market.uow(), market.dispatcher).execute("not-a-token")

    @pytest.mark.asyncio
    async def test_resend_issues_new_token(self, market):
        """Test resending replaces the verification token."""
        user_id = await market.register("shop@example.com", verify=False)
        old_token = await market.verification_token(user_id)

        response = await ResendVerificationUseCase(
            market.uow(), market.container.email_service, market.container.config
        ).execute("shop@example.com")

        assert response.success is True
        assert await market.verification_token(user_id) != old_token

    @pytest.mark.asyncio
    async def test_resend_for_verified_account(self, market):
        """Test resending to a verified address is refused."""
        await market.register("shop@example.com")

        with pytest.raises(DomainValidationError):
            await ResendVerificationUseCase(
                market.uow(), market.container.email_service, market.container.config
            ).execute("shop@example.com")

    @pytest.mark.asyncio
    async def test_resend_unknown_email(self, market):
        """Test resending to an unknown address is not found."""
        with pytest.raises(EntityNotFoundError):
            await ResendVerificationUseCase(
                market.uow(), market.container.email_service, market.container.config
            ).execute("ghost@example.com")


class TestPasswordReset:

    @pytest.mark.asyncio
    async def test_forgot_password_does_not_reveal_accounts(self, market):
        """Test unknown and known addresses get the same answer."""
        await market.register("shop@example.com")
        use_case = ForgotPasswordUseCase(
            market.uow(), market.container.email_service, market.container.config
        )

        known = await use_case.execute("shop@example.com")
        unknown = await ForgotPasswordUseCase(
            market.uow(), market.container.email_service, market.container.config
        ).execute("ghost@example.com")

        assert known.message == unknown.message == RESET_REQUESTED_MESSAGE

    @pytest.mark.asyncio
    async def test_reset_password_round_trip(self, market):
        """Test the reset token changes the password once."""
        user_id = await market.register("shop@example.com")
        await ForgotPasswordUseCase(
            market.uow(), market.container.email_service, market.container.config
        ).execute("shop@example.com")
        token = (await market.get("users", user_id)).password_reset_token

        await ResetPasswordUseCase(market.uow()).execute(ResetPasswordDto(token=token, password="brand-new"))

        response = await LoginUserUseCase(market.uow()).execute(
            LoginUserDto(email="shop@example.com", password="brand-new")
        )
        assert response.user.id == user_id
        with pytest.raises(DomainValidationError):
            await ResetPasswordUseCase(market.uow()).execute(ResetPasswordDto(token=token, password="again!"))


class TestUserApproval:

    @pytest.mark.asyncio
    async def test_pending_queue_and_approve(self, market):
        """Test the manual approval queue excludes admins and approved users."""
        user_id = await market.register("shop@example.com", verify=False)
        use_case = UserApprovalUseCase(market.uow(), market.dispatcher)

        pending = await use_case.list_pending()
        assert [u.id for u in pending] == [user_id]

        approved = await UserApprovalUseCase(market.uow(), market.dispatcher).approve(user_id, market.admin_id)

        assert approved.approved is True
        assert await UserApprovalUseCase(market.uow(), market.dispatcher).list_pending() == []

    @pytest.mark.asyncio
    async def test_reject_removes_account(self, market):
        """Test rejecting a user removes the account and its profile."""
        user_id = await market.register("shop@example.com", verify=False)

        removed = await UserApprovalUseCase(market.uow(), market.dispatcher).reject(user_id)

        assert removed == 2
        assert await market.get("users", user_id) is None
        assert await market.list_by("buyers", user_id=user_id) == []

    @pytest.mark.asyncio
    async def test_admin_cannot_be_rejected(self, market):
        """Test the admin account is protected."""
        with pytest.raises(DomainValidationError):
            await UserApprovalUseCase(market.uow(), market.dispatcher).reject(market.admin_id)


class TestSeedAdmin:

    @pytest.mark.asyncio
    async def test_seed_is_idempotent(self, market):
        """Test seeding twice returns the existing admin."""
        admin = await SeedAdminUseCase(market.uow()).execute("admin@tradeconnect.app", "other")

        assert admin.id == market.admin_id
        assert len(await market.list_by("users", role=UserRole.ADMIN)) == 1
