from .alert_repo import AlertRepository
from .appointment_repo import AppointmentRepository
from .followup_repo import FollowUpRepository
from .note_repo import NoteRepository
from .patient_repo import PatientRepository
from .summary_cache import SummaryCache

__all__ = [
    "AlertRepository",
    "AppointmentRepository",
    "FollowUpRepository",
    "NoteRepository",
    "PatientRepository",
    "SummaryCache",
]
