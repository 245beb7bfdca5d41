"""
Text-to-speech service interface.
"""

from abc import ABC, abstractmethod


class TTSService(ABC):
    """Abstract service turning text into spoken audio."""

    media_type: str = "audio/mpeg"

    @abstractmethod
    async def synthesize(self, text: str) -> bytes:
        """
        Render ``text`` as audio.

        Raises:
            ConfigurationError: provider credentials are missing
            TTSServiceError: provider rejected the request
        """
        pass
