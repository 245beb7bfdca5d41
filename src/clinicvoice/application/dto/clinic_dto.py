"""Clinic DTOs passed between the API layer and the use cases."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ...domain.entities import (
    Appointment,
    ClinicalNote,
    FollowUpItem,
    FollowUpMessage,
    Patient,
    PatternAlert,
    SOAPNote,
)
from ...domain.enums.clinical import AppointmentType, FollowUpStatus, NoteMode


@dataclass
class AlertCounts:
    critical: int = 0
    warning: int = 0
    info: int = 0

    @classmethod
    def from_alerts(cls, alerts: List[PatternAlert]) -> "AlertCounts":
        counts = cls()
        for alert in alerts:
            setattr(counts, alert.severity.value, getattr(counts, alert.severity.value) + 1)
        return counts


@dataclass
class PatientRosterEntry:
    """Roster row: the patient plus visit and alert rollups."""

    patient: Patient
    last_visit: Optional[str]
    total_notes: int
    alert_counts: AlertCounts


@dataclass
class PatientDetail:
    patient: Patient
    notes: List[ClinicalNote]
    appointments: List[Appointment]
    alerts: List[PatternAlert]


@dataclass
class PatientHistory:
    patient: Patient
    notes: List[ClinicalNote]
    appointments: List[Appointment]
    total_visits: int
    last_visit: Optional[str]


@dataclass
class PatientLookupResult:
    """Outcome of a by-name lookup from the voice agent."""

    found: bool
    patient: Optional[Patient] = None
    total_notes: int = 0
    last_visit: Optional[str] = None
    active_alerts: int = 0
    message: str = ""
    available_patients: List[Patient] = field(default_factory=list)


@dataclass
class SaveNoteRequest:
    patient_id: str
    subjective: str
    assessment: str
    objective: str = ""
    plan: str = ""
    mode: NoteMode = NoteMode.DICTATE


@dataclass
class SaveNoteResponse:
    note_id: str
    soap: SOAPNote
    message: str


@dataclass
class SummaryResponse:
    patient_name: str
    summary_text: str
    key_concerns: List[str]
    last_visit_date: Optional[str]
    total_visits: int
    generated_at: str
    cached: bool


@dataclass
class ScheduleCheckRequest:
    date: str
    time: str


@dataclass
class ScheduleCheckResponse:
    available: bool
    date: str
    time: str
    message: str
    reason: Optional[str] = None
    alternatives: List[str] = field(default_factory=list)


@dataclass
class BookAppointmentRequest:
    patient_id: str
    date: str
    time: str
    reason: str
    type: AppointmentType = AppointmentType.FOLLOW_UP
    patient_name: Optional[str] = None
    language: Optional[str] = None


@dataclass
class BookAppointmentResponse:
    appointment: Appointment
    message: str


@dataclass
class DashboardStats:
    todayCount: int
    weekCount: int
    patientCount: int


@dataclass
class PatternCheckResponse:
    alerts: List[PatternAlert]
    total: int
    critical: int
    warnings: int
    info: int


@dataclass
class FollowUpQueue:
    followups: List[FollowUpItem]
    total: int
    overdue: int
    upcoming: int


@dataclass
class UpdateFollowUpRequest:
    patient_id: str
    status: Optional[FollowUpStatus] = None
    due_date: Optional[str] = None


@dataclass
class SendFollowUpRequest:
    patient_id: str
    message_type: str = "appointment_reminder"
    message: Optional[str] = None
    send_email: bool = False
    send_sms: bool = True


@dataclass
class SendFollowUpResponse:
    record: FollowUpMessage
    channels: Dict[str, str]


@dataclass
class VoiceSessionRequest:
    mode: str
    patient_id: Optional[str] = None


@dataclass
class VoiceSessionResponse:
    mode: str
    label: str
    agent_id: str
    signed_url: str
    system_prompt: str
    first_message: str
    context: Optional[str] = None
