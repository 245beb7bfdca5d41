from .clinical import (
    AlertSeverity,
    AppointmentStatus,
    AppointmentType,
    DeliveryChannel,
    DeliveryStatus,
    FollowUpMessageType,
    FollowUpStatus,
    Gender,
    MedMode,
    NoteMode,
    Urgency,
)

__all__ = [
    "AlertSeverity",
    "AppointmentStatus",
    "AppointmentType",
    "DeliveryChannel",
    "DeliveryStatus",
    "FollowUpMessageType",
    "FollowUpStatus",
    "Gender",
    "MedMode",
    "NoteMode",
    "Urgency",
]
