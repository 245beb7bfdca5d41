"""
Email delivery service interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class EmailService(ABC):
    """Abstract service for outbound patient email."""

    @abstractmethod
    async def send_email(
        self, to: str, subject: str, body: str, reply_to: Optional[str] = None
    ) -> str:
        """
        Deliver one message.

        Returns:
            Provider message ID

        Raises:
            ConfigurationError: provider credentials are missing
            EmailDeliveryError: provider rejected the message
        """
        pass
