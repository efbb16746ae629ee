"""User entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional

from ...core.security import generate_reset_token, generate_verification_token
from ..enums import UserRole
from ..events.user_events import UserApproved, UserRegistered
from ..exceptions import DomainValidationError


@dataclass
class User:
    email: str
    password_hash: str
    role: UserRole = UserRole.BUYER
    id: Optional[int] = None

    approved: bool = False
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None

    email_verified: bool = False
    email_verification_token: Optional[str] = None
    email_verification_expires: Optional[datetime] = None

    password_reset_token: Optional[str] = None
    password_reset_expires: Optional[datetime] = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    # Domain events
    _events: List = field(default_factory=list, init=False, repr=False)

    @classmethod
    def create(cls, email: str, password_hash: str, role: UserRole, verification_hours: int = 24) -> 'User':
        """Factory method for a freshly registered, unverified account"""
        user = cls(email=email.lower(), password_hash=password_hash, role=role)
        user.issue_verification_token(verification_hours)
        return user

    def record_registration(self) -> None:
        """Emit the registration event once the repository has assigned an id"""
        self._events.append(UserRegistered(user_id=self.id, email=self.email, role=self.role))

    def issue_verification_token(self, expires_in_hours: int = 24) -> str:
        self.email_verification_token = generate_verification_token()
        self.email_verification_expires = datetime.utcnow() + timedelta(hours=expires_in_hours)
        self.updated_at = datetime.utcnow()
        return self.email_verification_token

    def verify_email(self) -> None:
        """Business logic: verify email; verification also approves the account"""
        if self.email_verification_expires and datetime.utcnow() > self.email_verification_expires:
            raise DomainValidationError(
                "Verification token has expired. Please request a new verification email.",
                "TOKEN_EXPIRED",
            )

        self.email_verified = True
        self.email_verification_token = None
        self.email_verification_expires = None
        self.updated_at = datetime.utcnow()
        if not self.approved:
            self.approved = True
            self.approved_at = datetime.utcnow()
            self._events.append(UserApproved(user_id=self.id, role=self.role))

    def approve(self, admin_id: int) -> None:
        """Business logic: manual approval by an administrator"""
        if self.approved:
            return
        self.approved = True
        self.approved_by = admin_id
        self.approved_at = datetime.utcnow()
        self.updated_at = datetime.utcnow()
        self._events.append(UserApproved(user_id=self.id, role=self.role))

    def issue_password_reset_token(self, expires_in_hours: int = 1) -> str:
        self.password_reset_token = generate_reset_token()
        self.password_reset_expires = datetime.utcnow() + timedelta(hours=expires_in_hours)
        self.updated_at = datetime.utcnow()
        return self.password_reset_token

    def reset_password(self, password_hash: str) -> None:
        """Business logic: replace the password using a still-valid reset token"""
        if not self.password_reset_expires or datetime.utcnow() > self.password_reset_expires:
            raise DomainValidationError("Invalid or expired reset token", "TOKEN_EXPIRED")

        self.password_hash = password_hash
        self.password_reset_token = None
        self.password_reset_expires = None
        self.updated_at = datetime.utcnow()

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_approved(self) -> bool:
        # Administrators never wait for approval
        return self.is_admin or self.approved

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events
