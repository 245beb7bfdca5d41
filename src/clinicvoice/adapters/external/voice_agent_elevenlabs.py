"""
ElevenLabs conversational agent gateway.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from clinicvoice.application.ports.services.voice_agent_service import VoiceAgentService
from clinicvoice.core.config import ElevenLabsSettings, get_settings
from clinicvoice.core.exceptions import ConfigurationError, VoiceAgentError

logger = logging.getLogger(__name__)


class ElevenLabsVoiceAgentService(VoiceAgentService):
    """Requests signed conversation URLs so the API key never reaches the browser."""

    def __init__(self, settings: Optional[ElevenLabsSettings] = None) -> None:
        self._settings = settings or get_settings().elevenlabs

    @property
    def agent_id(self) -> str:
        return self._settings.agent_id

    async def get_signed_url(self) -> str:
        if not self._settings.agent_configured:
            raise ConfigurationError(
                "ElevenLabs agent not configured. Please set ELEVENLABS_API_KEY and ELEVENLABS_AGENT_ID."
            )

        url = f"{self._settings.base_url.rstrip('/')}/v1/convai/conversation/get-signed-url"
        headers = {"xi-api-key": self._settings.api_key}
        timeout = aiohttp.ClientTimeout(total=self._settings.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(
                    url, params={"agent_id": self._settings.agent_id}, headers=headers
                ) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(f"ElevenLabs signed URL error: {response.status} {error_text}")
                        raise VoiceAgentError(
                            f"Upstream returned {response.status}", {"status": response.status}
                        )
                    data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"ElevenLabs signed URL request failed: {e}", exc_info=True)
            raise VoiceAgentError(f"Request failed: {e}")

        signed_url = data.get("signed_url") if isinstance(data, dict) else None
        if not signed_url:
            logger.error(f"ElevenLabs signed URL response missing signed_url: {data}")
            raise VoiceAgentError("Response did not include a signed URL")
        return signed_url
