"""Security utilities"""

import secrets

from passlib.context import CryptContext

from .config import settings


# Password context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password"""
    return pwd_context.verify(plain_password, hashed_password)


def generate_verification_token() -> str:
    """Generate a secure email verification token (64 hex chars)."""
    return secrets.token_hex(32)


def generate_reset_token() -> str:
    """Generate a secure password reset token (64 hex chars)."""
    return secrets.token_hex(32)
