"""
Voice agent endpoints: mode catalogue, session start and client-tool callbacks.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Request

from ...adapters.external.voice_client_tools import (
    CONFIRMATIONS,
    UnknownClientToolError,
    handle_client_tool,
)
from ...adapters.external.voice_modes import VOICE_MODES, list_voice_modes
from ...application.dto.clinic_dto import VoiceSessionRequest as VoiceSessionCommand
from ...application.use_cases.start_voice_session import StartVoiceSessionUseCase
from ...core.exceptions import ConfigurationError, VoiceAgentError
from ...domain.errors import InvalidVoiceModeError
from ...domain.errors import PatientNotFoundError as DomainPatientNotFoundError
from ..deps import PatientRepositoryDep, VoiceAgentServiceDep
from ..errors import (
    BadRequestError,
    DownstreamError,
    NotFoundError,
    PatientNotFoundError,
    ServiceNotConfiguredError,
)
from ..schemas.common import ApiResponse
from ..schemas.voice import ClientToolOut, VoiceModeOut, VoiceSessionOut, VoiceSessionRequest
from ..utils.responses import ok

router = APIRouter(prefix="/voice", tags=["voice"])
logger = logging.getLogger("clinicvoice")


@router.get("/modes", response_model=ApiResponse[List[VoiceModeOut]])
async def get_voice_modes(request: Request):
    data = [
        VoiceModeOut(
            mode=mode.mode.value,
            label=mode.label,
            system_prompt=mode.system_prompt,
            first_message=mode.first_message,
            client_tools=list(mode.client_tools),
            server_tools=dict(mode.server_tools),
        )
        for mode in list_voice_modes()
    ]
    return ok(request, data=data, message="OK")


@router.post("/session", response_model=ApiResponse[VoiceSessionOut])
async def start_voice_session(
    payload: VoiceSessionRequest,
    request: Request,
    patient_repo: PatientRepositoryDep,
    voice_agent: VoiceAgentServiceDep,
):
    """
    Start a voice conversation.

    Returns a signed session URL for the configured agent together with the
    mode's prompt and first message. With a patient, ``context`` carries the
    one-line briefing to send as a contextual update once connected.
    """
    use_case = StartVoiceSessionUseCase(patient_repo, voice_agent, VOICE_MODES)
    command = VoiceSessionCommand(mode=payload.mode, patient_id=payload.patient_id)
    try:
        session = await use_case.execute(command)
    except InvalidVoiceModeError as e:
        raise BadRequestError(e.message, e.details)
    except DomainPatientNotFoundError:
        raise PatientNotFoundError(payload.patient_id)
    except ConfigurationError as e:
        logger.error(f"Voice agent not configured: {e.message}")
        raise ServiceNotConfiguredError("Voice agent not configured")
    except VoiceAgentError:
        raise DownstreamError("Failed to start voice session")
    return ok(request, data=VoiceSessionOut.model_validate(session), message="OK")


@router.post("/client-tools/{tool}", response_model=ApiResponse[ClientToolOut])
async def client_tool(
    tool: str,
    request: Request,
    params: Optional[Dict[str, Any]] = Body(None),
):
    """Normalize a display-tool callback into the payload the UI renders."""
    try:
        display = handle_client_tool(tool, params)
    except UnknownClientToolError:
        raise NotFoundError(f"Unknown client tool '{tool}'", {"tool": tool}, "UNKNOWN_CLIENT_TOOL")
    result = CONFIRMATIONS[tool]
    return ok(request, data=ClientToolOut(tool=tool, result=result, display=display), message=result)
