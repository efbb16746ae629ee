"""Application configuration"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "TradeConnect"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "B2B marketplace moderation backend"

    # Storage backend: "memory" or "sql"
    STORAGE_BACKEND: str = "memory"

    # Database
    DATABASE_URL: str = "sqlite:///./tradeconnect.db"
    DATABASE_ECHO: bool = False

    # CORS
    ALLOWED_HOSTS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Application URLs
    FRONTEND_URL: str = "http://localhost:5173"

    # Email delivery (Brevo primary, SendGrid fallback)
    EMAIL_DELIVERY_ENABLED: bool = False
    BREVO_API_KEY: Optional[str] = None
    BREVO_API_URL: str = "https://api.brevo.com/v3/smtp/email"
    SENDGRID_API_KEY: Optional[str] = None
    SENDGRID_API_URL: str = "https://api.sendgrid.com/v3/mail/send"
    FROM_EMAIL: str = "noreply@tradeconnect.app"
    FROM_NAME: str = "TradeConnect"
    EMAIL_TIMEOUT_SECONDS: float = 10.0

    # Token lifetimes
    EMAIL_VERIFICATION_EXPIRE_HOURS: int = 24
    PASSWORD_RESET_EXPIRE_HOURS: int = 1

    # Security
    BCRYPT_ROUNDS: int = 12

    # Admin account seeded at startup
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None

    # Development
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    TESTING: bool = False
    ENVIRONMENT: str = "development"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
