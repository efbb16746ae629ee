"""Email service for account verification and password reset mail"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ...core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Raised by a single provider when it refuses or cannot take a message."""


@dataclass
class EmailResult:
    success: bool
    provider: Optional[str] = None
    error: Optional[str] = None

    @property
    def status(self) -> str:
        return "sent" if self.success else "failed"


class EmailService:
    """Sends transactional mail through Brevo, falling back to SendGrid once.

    With delivery disabled (the default outside production) messages are
    only logged, and the send counts as successful.
    """

    def __init__(self, config: Settings = None, transport: httpx.AsyncBaseTransport = None):
        config = config or default_settings
        self.delivery_enabled = config.EMAIL_DELIVERY_ENABLED
        self.brevo_api_key = config.BREVO_API_KEY
        self.brevo_api_url = config.BREVO_API_URL
        self.sendgrid_api_key = config.SENDGRID_API_KEY
        self.sendgrid_api_url = config.SENDGRID_API_URL
        self.from_email = config.FROM_EMAIL
        self.from_name = config.FROM_NAME
        self.frontend_url = config.FRONTEND_URL
        self.timeout = config.EMAIL_TIMEOUT_SECONDS
        self.verification_hours = config.EMAIL_VERIFICATION_EXPIRE_HOURS
        self.reset_hours = config.PASSWORD_RESET_EXPIRE_HOURS
        self._transport = transport

    async def send_email(self, to_email: str, subject: str, html_content: str, text_content: str) -> EmailResult:
        """Send one message, trying each configured provider in turn"""
        if not self.delivery_enabled:
            logger.info("Email delivery disabled, not sending '%s' to %s", subject, to_email)
            logger.debug("Email body for %s:\n%s", to_email, text_content)
            return EmailResult(success=True, provider="log")

        errors = {}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for provider, send in (("Brevo", self._send_brevo), ("SendGrid", self._send_sendgrid)):
                try:
                    await send(client, to_email, subject, html_content, text_content)
                except (EmailDeliveryError, httpx.HTTPError) as e:
                    logger.warning("%s failed to send email to %s: %s", provider, to_email, e)
                    errors[provider] = str(e) or e.__class__.__name__
                    continue
                logger.info("Email '%s' sent to %s via %s", subject, to_email, provider)
                return EmailResult(success=True, provider=provider)

        error = "Both email services failed. " + ", ".join(
            f"{provider}: {message}" for provider, message in errors.items()
        )
        logger.error(error)
        return EmailResult(success=False, error=error)

    async def _send_brevo(self, client: httpx.AsyncClient, to_email, subject, html_content, text_content) -> None:
        if not self.brevo_api_key:
            raise EmailDeliveryError("API key not configured")

        response = await client.post(
            self.brevo_api_url,
            headers={"api-key": self.brevo_api_key, "accept": "application/json"},
            json={
                "sender": {"name": self.from_name, "email": self.from_email},
                "to": [{"email": to_email}],
                "subject": subject,
                "htmlContent": html_content,
                "textContent": text_content,
            },
        )
        if response.status_code >= 400:
            raise EmailDeliveryError(f"HTTP {response.status_code}: {response.text}")

    async def _send_sendgrid(self, client: httpx.AsyncClient, to_email, subject, html_content, text_content) -> None:
        if not self.sendgrid_api_key:
            raise EmailDeliveryError("API key not configured")

        response = await client.post(
            self.sendgrid_api_url,
            headers={"Authorization": f"Bearer {self.sendgrid_api_key}"},
            json={
                "personalizations": [{"to": [{"email": to_email}]}],
                "from": {"email": self.from_email, "name": self.from_name},
                "subject": subject,
                "content": [
                    {"type": "text/plain", "value": text_content},
                    {"type": "text/html", "value": html_content},
                ],
            },
        )
        if response.status_code >= 400:
            raise EmailDeliveryError(f"HTTP {response.status_code}: {response.text}")

    async def send_verification_email(self, to_email: str, verification_token: str) -> EmailResult:
        """Send email verification email"""
        verification_url = f"{self.frontend_url}/verify-email?token={verification_token}"

        subject = f"Verify your {self.from_name} account"

        html_content = f"""
        <!DOCTYPE html>
        <html>
        <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
            <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
                <h1>Welcome to {self.from_name}</h1>
                <p>Please confirm your email address to activate your account.</p>
                <p><a href="{verification_url}" style="display: inline-block; background: #2563eb; color: white; padding: 12px 30px; text-decoration: none; border-radius: 5px;">Verify Email</a></p>
                <p>Or copy and paste this link into your browser:</p>
                <p><a href="{verification_url}">{verification_url}</a></p>
                <p>This link will expire in {self.verification_hours} hours.</p>
            </div>
        </body>
        </html>
        """

        text_content = f"""
        Welcome to {self.from_name}

        Please confirm your email address by opening this link:
        {verification_url}

        This link will expire in {self.verification_hours} hours.
        """

        return await self.send_email(to_email, subject, html_content, text_content)

    async def send_password_reset_email(self, to_email: str, reset_token: str) -> EmailResult:
        """Send password reset email"""
        reset_url = f"{self.frontend_url}/reset-password?token={reset_token}"

        subject = "Reset your password"

        html_content = f"""
        <!DOCTYPE html>
        <html>
        <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
            <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
                <h1>Password Reset</h1>
                <p>We received a request to reset your {self.from_name} password.</p>
                <p><a href="{reset_url}" style="display: inline-block; background: #dc3545; color: white; padding: 12px 30px; text-decoration: none; border-radius: 5px;">Reset Password</a></p>
                <p>Or copy and paste this link into your browser:</p>
                <p><a href="{reset_url}">{reset_url}</a></p>
                <p>This link will expire in {self.reset_hours} hour(s). If you didn't request this reset, ignore this email.</p>
            </div>
        </body>
        </html>
        """

        text_content = f"""
        Password Reset Request

        We received a request to reset your {self.from_name} password.

        Click this link to reset your password:
        {reset_url}

        This link will expire in {self.reset_hours} hour(s).

        If you didn't request this reset, you can safely ignore this email.
        """

        return await self.send_email(to_email, subject, html_content, text_content)
