"""
Closed value sets used across the clinic domain.
"""

from enum import Enum


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class NoteMode(str, Enum):
    """How a clinical note was produced."""
    DICTATE = "dictate"
    SUMMARIZE = "summarize"


class AppointmentType(str, Enum):
    FOLLOW_UP = "follow_up"
    NEW_CONSULTATION = "new_consultation"
    PROCEDURE = "procedure"
    LAB_REVIEW = "lab_review"

    @property
    def label(self) -> str:
        return _APPOINTMENT_TYPE_LABELS[self]


_APPOINTMENT_TYPE_LABELS = {
    AppointmentType.FOLLOW_UP: "Follow-up",
    AppointmentType.NEW_CONSULTATION: "New Consultation",
    AppointmentType.PROCEDURE: "Procedure",
    AppointmentType.LAB_REVIEW: "Lab Review",
}


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class AlertSeverity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class FollowUpStatus(str, Enum):
    OVERDUE = "overdue"
    UPCOMING = "upcoming"
    COMPLETED = "completed"


class Urgency(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return {"high": 0, "medium": 1, "low": 2}[self.value]


class FollowUpMessageType(str, Enum):
    APPOINTMENT_REMINDER = "appointment_reminder"
    LAB_RESULTS = "lab_results"
    MEDICATION_CHECK = "medication_check"


class DeliveryChannel(str, Enum):
    EMAIL = "email"
    SMS = "sms"


class DeliveryStatus(str, Enum):
    SENT = "sent"
    QUEUED = "queued"
    SKIPPED = "skipped"


class MedMode(str, Enum):
    """Voice assistant dialog modes."""
    DICTATE = "dictate"
    SUMMARIZE = "summarize"
    PATTERN = "pattern"
    BOOKING = "booking"
    FOLLOWUP = "followup"
