"""Start Voice Session use case."""

import logging
from typing import Mapping

from ...domain.enums.clinical import MedMode
from ...domain.errors import InvalidVoiceModeError, PatientNotFoundError
from ...domain.value_objects.voice_mode import VoiceMode
from ..dto.clinic_dto import VoiceSessionRequest, VoiceSessionResponse
from ..ports.repositories.patient_repo import PatientRepository
from ..ports.services.voice_agent_service import VoiceAgentService

logger = logging.getLogger(__name__)


class StartVoiceSessionUseCase:
    """Hand the browser everything it needs to open a voice conversation.

    The patient, when given, is resolved before the platform is contacted so
    an unknown ID never costs a signed URL.
    """

    def __init__(
        self,
        patient_repository: PatientRepository,
        voice_agent_service: VoiceAgentService,
        voice_modes: Mapping[MedMode, VoiceMode],
    ):
        self._patient_repository = patient_repository
        self._voice_agent_service = voice_agent_service
        self._voice_modes = voice_modes

    async def execute(self, request: VoiceSessionRequest) -> VoiceSessionResponse:
        try:
            mode = MedMode((request.mode or "").strip().lower())
        except ValueError:
            raise InvalidVoiceModeError(request.mode, [m.value for m in MedMode])
        config = self._voice_modes[mode]

        context = None
        if request.patient_id:
            patient = await self._patient_repository.find_by_id(request.patient_id)
            if not patient:
                raise PatientNotFoundError(request.patient_id)
            context = patient.context_line()

        signed_url = await self._voice_agent_service.get_signed_url()
        logger.info(f"Voice session started: mode={mode.value} patient={request.patient_id or '-'}")

        return VoiceSessionResponse(
            mode=mode.value,
            label=config.label,
            agent_id=self._voice_agent_service.agent_id,
            signed_url=signed_url,
            system_prompt=config.system_prompt,
            first_message=config.first_message,
            context=context,
        )
