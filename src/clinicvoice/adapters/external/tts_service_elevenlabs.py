"""
ElevenLabs text-to-speech implementation.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from clinicvoice.application.ports.services.tts_service import TTSService
from clinicvoice.core.config import ElevenLabsSettings, get_settings
from clinicvoice.core.exceptions import ConfigurationError, TTSServiceError

logger = logging.getLogger(__name__)


class ElevenLabsTTSService(TTSService):
    """Renders speech through the ElevenLabs text-to-speech REST API."""

    media_type = "audio/mpeg"

    def __init__(self, settings: Optional[ElevenLabsSettings] = None) -> None:
        self._settings = settings or get_settings().elevenlabs

    async def synthesize(self, text: str) -> bytes:
        if not self._settings.is_configured:
            raise ConfigurationError(
                "ElevenLabs API key not configured. Please set ELEVENLABS_API_KEY environment variable."
            )

        url = f"{self._settings.base_url.rstrip('/')}/v1/text-to-speech/{self._settings.voice_id}"
        headers = {
            "xi-api-key": self._settings.api_key,
            "Content-Type": "application/json",
            "Accept": self.media_type,
        }
        payload = {
            "text": text,
            "model_id": self._settings.model_id,
            "voice_settings": {
                "stability": self._settings.stability,
                "similarity_boost": self._settings.similarity_boost,
            },
        }

        timeout = aiohttp.ClientTimeout(total=self._settings.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(url, json=payload, headers=headers) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(f"ElevenLabs TTS error: {response.status} {error_text}")
                        raise TTSServiceError(
                            f"Upstream returned {response.status}", {"status": response.status}
                        )
                    audio = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"ElevenLabs TTS request failed: {e}", exc_info=True)
            raise TTSServiceError(f"Request failed: {e}")

        logger.info(f"Synthesized {len(text)} characters into {len(audio)} bytes of audio")
        return audio
