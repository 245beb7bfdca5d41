"""
Email delivery through a Resend-compatible REST API.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from clinicvoice.application.ports.services.email_service import EmailService
from clinicvoice.core.config import EmailSettings, get_settings
from clinicvoice.core.exceptions import ConfigurationError, EmailDeliveryError

logger = logging.getLogger(__name__)


class ResendEmailService(EmailService):
    def __init__(self, settings: Optional[EmailSettings] = None) -> None:
        self._settings = settings or get_settings().email

    async def send_email(
        self, to: str, subject: str, body: str, reply_to: Optional[str] = None
    ) -> str:
        if not self._settings.is_configured:
            raise ConfigurationError(
                "Email API key not configured. Please set EMAIL_API_KEY environment variable."
            )

        payload: Dict[str, Any] = {
            "from": self._settings.from_address,
            "to": [to],
            "subject": subject,
            "text": body,
        }
        if reply_to:
            payload["reply_to"] = reply_to
        headers = {"Authorization": f"Bearer {self._settings.api_key}"}

        timeout = aiohttp.ClientTimeout(total=self._settings.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    f"{self._settings.base_url.rstrip('/')}/emails", json=payload, headers=headers
                ) as response:
                    if response.status not in (200, 201, 202):
                        error_text = await response.text()
                        logger.error(f"Email API error: {response.status} {error_text}")
                        raise EmailDeliveryError(
                            f"Upstream returned {response.status}", {"status": response.status}
                        )
                    data = await self._read_json(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Email API request failed: {e}", exc_info=True)
            raise EmailDeliveryError(f"Request failed: {e}")

        message_id = str(data.get("id", "")) if isinstance(data, dict) else ""
        logger.info(f"Email accepted by provider: id={message_id or '-'}")
        return message_id

    @staticmethod
    async def _read_json(response: aiohttp.ClientResponse) -> Any:
        """Body of an accepted send; a non-JSON body only loses the provider id."""
        try:
            return await response.json(content_type=None)
        except ValueError:
            body = await response.text()
            logger.warning(f"Email API accepted the message with a non-JSON body: {body[:200]}")
            return None
