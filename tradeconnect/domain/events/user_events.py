"""User domain events"""

from dataclasses import dataclass

from ..enums import UserRole


@dataclass(frozen=True)
class UserRegistered:
    user_id: int
    email: str
    role: UserRole


@dataclass(frozen=True)
class UserApproved:
    user_id: int
    role: UserRole
