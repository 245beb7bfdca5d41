"""
Text-to-speech proxy. Keeps the provider key on the server.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from ...core.exceptions import ConfigurationError, TTSServiceError
from ..deps import TTSServiceDep
from ..errors import DownstreamError, ServiceNotConfiguredError
from ..schemas.voice import TTSRequest

router = APIRouter(tags=["voice"])
logger = logging.getLogger("clinicvoice")


@router.post(
    "/tts",
    response_class=Response,
    responses={200: {"content": {"audio/mpeg": {}}, "description": "Spoken audio"}},
)
async def text_to_speech(payload: TTSRequest, tts_service: TTSServiceDep):
    try:
        audio = await tts_service.synthesize(payload.text)
    except ConfigurationError as e:
        logger.error(f"TTS not configured: {e.message}")
        raise ServiceNotConfiguredError("TTS API key not configured")
    except TTSServiceError:
        # Provider body already logged by the adapter
        raise DownstreamError("TTS generation failed")

    return Response(
        content=audio,
        media_type=tts_service.media_type,
        headers={"Cache-Control": "no-store"},
    )
