from .alert_repository import MemoryAlertRepository
from .appointment_repository import MemoryAppointmentRepository
from .followup_repository import MemoryFollowUpRepository
from .note_repository import MemoryNoteRepository
from .patient_repository import MemoryPatientRepository

__all__ = [
    "MemoryAlertRepository",
    "MemoryAppointmentRepository",
    "MemoryFollowUpRepository",
    "MemoryNoteRepository",
    "MemoryPatientRepository",
]
