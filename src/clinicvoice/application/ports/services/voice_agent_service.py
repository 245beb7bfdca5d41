"""
Conversational voice agent service interface.
"""

from abc import ABC, abstractmethod


class VoiceAgentService(ABC):
    """Abstract gateway to the conversational voice platform."""

    @abstractmethod
    async def get_signed_url(self) -> str:
        """
        Obtain a short-lived URL the browser uses to open a voice session.

        Raises:
            ConfigurationError: agent ID or API key missing
            VoiceAgentError: platform rejected the request
        """
        pass

    @property
    @abstractmethod
    def agent_id(self) -> str:
        pass
