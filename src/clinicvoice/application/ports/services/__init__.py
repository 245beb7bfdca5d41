from .email_service import EmailService
from .tts_service import TTSService
from .voice_agent_service import VoiceAgentService

__all__ = ["EmailService", "TTSService", "VoiceAgentService"]
