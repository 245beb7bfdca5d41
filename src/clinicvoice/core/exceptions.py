"""
Exception handling for Clinic Voice.

This module provides custom exception classes for the infrastructure
layers of the application (configuration and external services).
"""

from typing import Any, Dict, Optional


class ClinicVoiceException(Exception):
    """Base exception class for Clinic Voice."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ClinicVoiceException):
    """Raised when there's a configuration error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "CONFIG_ERROR", details)


class ExternalServiceError(ClinicVoiceException):
    """Raised when there's an external service error."""

    def __init__(
        self, service: str, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.service = service
        full_message = f"{service} service error: {message}"
        super().__init__(full_message, "EXTERNAL_SERVICE_ERROR", details)


class TTSServiceError(ExternalServiceError):
    """Raised when text-to-speech generation fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("TTS", message, details)


class VoiceAgentError(ExternalServiceError):
    """Raised when the conversational voice platform rejects a request."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("VoiceAgent", message, details)


class EmailDeliveryError(ExternalServiceError):
    """Raised when the email API fails to accept a message."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("Email", message, details)
