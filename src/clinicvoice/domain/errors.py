"""
Domain-specific error types for business rule violations.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base domain error."""

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


class PatientNotFoundError(DomainError):
    """Patient not found."""

    def __init__(self, patient_id: str) -> None:
        message = f"Patient with ID '{patient_id}' not found"
        super().__init__(message, "PATIENT_NOT_FOUND", {"patient_id": patient_id})


class InvalidPatientDataError(DomainError):
    """Invalid patient data."""

    def __init__(self, field: str, value: Any) -> None:
        message = f"Invalid patient data. Field: {field}, Value: {value}"
        super().__init__(
            message, "INVALID_PATIENT_DATA", {"field": field, "value": value}
        )


class AppointmentNotFoundError(DomainError):
    """Appointment not found."""

    def __init__(self, appointment_id: str) -> None:
        message = f"Appointment with ID '{appointment_id}' not found"
        super().__init__(message, "APPOINTMENT_NOT_FOUND", {"appointment_id": appointment_id})


class FollowUpNotFoundError(DomainError):
    """No follow-up queued for the patient."""

    def __init__(self, patient_id: str) -> None:
        message = f"No follow-up found for patient '{patient_id}'"
        super().__init__(message, "FOLLOWUP_NOT_FOUND", {"patient_id": patient_id})


class InvalidNoteError(DomainError):
    """SOAP note is missing required sections."""

    def __init__(self, missing_fields: list) -> None:
        message = f"Missing required fields: {', '.join(missing_fields)}"
        super().__init__(message, "INVALID_NOTE", {"missing_fields": missing_fields})


class InvalidScheduleRequestError(DomainError):
    """Date or time could not be understood."""

    def __init__(self, field: str, value: Any) -> None:
        message = f"Invalid {field}: {value}"
        super().__init__(message, "INVALID_SCHEDULE_REQUEST", {"field": field, "value": value})


class SlotUnavailableError(DomainError):
    """Requested appointment slot cannot be booked."""

    def __init__(self, date: str, time: str, reason: str, alternatives: Optional[list] = None) -> None:
        message = f"The slot on {date} at {time} is not available: {reason}"
        super().__init__(
            message,
            "SLOT_UNAVAILABLE",
            {"date": date, "time": time, "reason": reason, "alternatives": alternatives or []},
        )


class InvalidVoiceModeError(DomainError):
    """Voice session requested for a mode that does not exist."""

    def __init__(self, mode: str, valid_modes: list) -> None:
        message = f"Unknown voice mode '{mode}'. Valid modes: {', '.join(valid_modes)}"
        super().__init__(message, "INVALID_VOICE_MODE", {"mode": mode, "valid_modes": valid_modes})


class NoDeliveryChannelError(DomainError):
    """Follow-up requested without email or SMS."""

    def __init__(self) -> None:
        super().__init__(
            "At least one delivery channel (email or SMS) must be requested",
            "NO_DELIVERY_CHANNEL",
            {"send_email": False, "send_sms": False},
        )
