"""User repository interface"""

from abc import abstractmethod
from typing import Optional

from ..entities.user import User
from .base import IRepository


class IUserRepository(IRepository[User]):

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_verification_token(self, token: str) -> Optional[User]:
        """Get user by email verification token"""
        pass

    @abstractmethod
    async def get_by_reset_token(self, token: str) -> Optional[User]:
        """Get user by password reset token"""
        pass
