"""Registration, login, email verification and password reset"""

import logging
from typing import List

from ...core.config import Settings, settings as default_settings
from ...core.security import get_password_hash, verify_password
from ...domain.entities.buyer import BuyerProfile
from ...domain.entities.supplier import SupplierProfile
from ...domain.entities.user import User
from ...domain.enums import UserRole
from ...domain.exceptions import (
    AccountPendingApprovalError,
    DomainValidationError,
    EmailNotVerifiedError,
    EntityNotFoundError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService
from ..cascade import cascade_delete
from ..dtos.auth_dtos import (
    LoginResponse,
    LoginUserDto,
    MessageResponse,
    RegisterResponse,
    RegisterUserDto,
    ResetPasswordDto,
    UserDto,
)
from ..event_dispatcher import EventDispatcher
from .common import get_or_raise

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If an account with that email exists, a password reset link has been sent."


class RegisterUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, email_service: EmailService,
                 dispatcher: EventDispatcher, config: Settings = None):
        self.unit_of_work = unit_of_work
        self.email_service = email_service
        self.dispatcher = dispatcher
        self.config = config or default_settings

    async def execute(self, request: RegisterUserDto) -> RegisterResponse:
        events: List = []
        async with self.unit_of_work:
            existing = await self.unit_of_work.users.get_by_email(request.email)
            if existing:
                if existing.email_verified:
                    raise UserAlreadyExistsError()
                # An abandoned, never verified registration must not lock the address
                logger.info("Replacing unverified account %s for %s", existing.id, existing.email)
                await cascade_delete(self.unit_of_work, "users", existing.id)

            user = User.create(
                email=request.email,
                password_hash=get_password_hash(request.password),
                role=request.role,
                verification_hours=self.config.EMAIL_VERIFICATION_EXPIRE_HOURS,
            )
            user = await self.unit_of_work.users.add(user)
            user.record_registration()

            if request.role == UserRole.SUPPLIER:
                profile = await self.unit_of_work.suppliers.add(SupplierProfile.create_empty(user.id))
            else:
                profile = await self.unit_of_work.buyers.add(BuyerProfile.create_empty(user.id))
            profile.record_creation()

            await self.unit_of_work.commit()
            events = user.get_events() + profile.get_events()

        await self.dispatcher.dispatch(events)

        result = await self.email_service.send_verification_email(
            to_email=user.email,
            verification_token=user.email_verification_token,
        )
        if result.success:
            message = "Registration successful! Please check your email to verify your account."
        else:
            message = ("Registration successful, but the verification email could not be sent. "
                       "Please request a new verification email.")

        logger.info("Registered %s user %s", user.role.value, user.id)
        return RegisterResponse(
            message=message,
            user=UserDto.model_validate(user),
            email_status=result.status,
            email_error=result.error,
        )


class LoginUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: LoginUserDto) -> LoginResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(request.email)

        if not user or not verify_password(request.password, user.password_hash):
            raise InvalidCredentialsError()

        if not user.is_admin and not user.email_verified:
            raise EmailNotVerifiedError(user.email)

        if not user.is_approved:
            raise AccountPendingApprovalError()

        return LoginResponse(user=UserDto.model_validate(user))


class VerifyEmailUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, dispatcher: EventDispatcher):
        self.unit_of_work = unit_of_work
        self.dispatcher = dispatcher

    async def execute(self, token: str) -> MessageResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_verification_token(token)
            if not user:
                raise DomainValidationError("Invalid verification token", "INVALID_TOKEN")

            user.verify_email()
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        await self.dispatcher.dispatch(user.get_events())
        return MessageResponse(message="Email verified successfully! Your account is now active.")


class ResendVerificationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, email_service: EmailService, config: Settings = None):
        self.unit_of_work = unit_of_work
        self.email_service = email_service
        self.config = config or default_settings

    async def execute(self, email: str) -> MessageResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(email)
            if not user:
                raise EntityNotFoundError("User", message="No account found with this email address")
            if user.email_verified:
                raise DomainValidationError("Email is already verified")

            token = user.issue_verification_token(self.config.EMAIL_VERIFICATION_EXPIRE_HOURS)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        result = await self.email_service.send_verification_email(user.email, token)
        if not result.success:
            return MessageResponse(message=result.error, success=False)
        return MessageResponse(message="Verification email sent. Please check your inbox.")


class ForgotPasswordUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, email_service: EmailService, config: Settings = None):
        self.unit_of_work = unit_of_work
        self.email_service = email_service
        self.config = config or default_settings

    async def execute(self, email: str) -> MessageResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(email)
            if not user:
                # Same answer either way so the endpoint cannot be used to probe accounts
                return MessageResponse(message=RESET_REQUESTED_MESSAGE)

            token = user.issue_password_reset_token(self.config.PASSWORD_RESET_EXPIRE_HOURS)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        result = await self.email_service.send_password_reset_email(user.email, token)
        if not result.success:
            logger.error("Password reset email for user %s failed: %s", user.id, result.error)
        return MessageResponse(message=RESET_REQUESTED_MESSAGE)


class ResetPasswordUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: ResetPasswordDto) -> MessageResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_reset_token(request.token)
            if not user:
                raise DomainValidationError("Invalid or expired reset token", "INVALID_TOKEN")

            user.reset_password(get_password_hash(request.password))
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        return MessageResponse(message="Password has been reset successfully")


class UserApprovalUseCase:
    """Manual account approval queue for administrators"""

    def __init__(self, unit_of_work: IUnitOfWork, dispatcher: EventDispatcher):
        self.unit_of_work = unit_of_work
        self.dispatcher = dispatcher

    async def list_pending(self) -> List[UserDto]:
        async with self.unit_of_work:
            users = await self.unit_of_work.users.list_by(approved=False)
        return [UserDto.model_validate(user) for user in users if not user.is_admin]

    async def approve(self, user_id: int, admin_id: int) -> UserDto:
        async with self.unit_of_work:
            user = await get_or_raise(self.unit_of_work.users, user_id, "User")
            user.approve(admin_id)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        await self.dispatcher.dispatch(user.get_events())
        logger.info("User %s approved by admin %s", user_id, admin_id)
        return UserDto.model_validate(user)

    async def reject(self, user_id: int) -> int:
        """Remove the account with everything it owns"""
        async with self.unit_of_work:
            user = await get_or_raise(self.unit_of_work.users, user_id, "User")
            if user.is_admin:
                raise DomainValidationError("Administrator accounts cannot be rejected")
            removed = await cascade_delete(self.unit_of_work, "users", user_id)
            await self.unit_of_work.commit()

        logger.info("User %s rejected, %d record(s) removed", user_id, removed)
        return removed


class SeedAdminUseCase:
    """Create the configured administrator account if it does not exist"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, email: str, password: str) -> User:
        async with self.unit_of_work:
            existing = await self.unit_of_work.users.get_by_email(email)
            if existing:
                return existing

            admin = User(
                email=email.lower(),
                password_hash=get_password_hash(password),
                role=UserRole.ADMIN,
                approved=True,
                email_verified=True,
            )
            admin = await self.unit_of_work.users.add(admin)
            await self.unit_of_work.commit()

        logger.info("Seeded administrator account %s", admin.email)
        return admin
