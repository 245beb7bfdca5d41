"""
Patient roster and lookup schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ...domain.enums.clinical import Gender
from .common import EntitySchema, optional_text, required_text
from .medical import ClinicalNoteOut, PatternAlertOut
from .scheduling import AppointmentOut


class MedicationOut(EntitySchema):
    name: str
    dosage: str
    frequency: str


class EmergencyContactOut(EntitySchema):
    name: str
    relation: str
    phone: str


class PatientOut(EntitySchema):
    id: str
    name: str
    age: int
    gender: Gender
    phone: str
    email: Optional[str] = None
    blood_group: str
    language: str
    allergies: List[str] = Field(default_factory=list)
    chronic_conditions: List[str] = Field(default_factory=list)
    current_medications: List[MedicationOut] = Field(default_factory=list)
    emergency_contact: Optional[EmergencyContactOut] = None


class AlertCountsOut(EntitySchema):
    critical: int = 0
    warning: int = 0
    info: int = 0


class PatientRosterOut(PatientOut):
    last_visit: Optional[str] = None
    total_notes: int = 0
    alert_counts: AlertCountsOut


class PatientDetailOut(EntitySchema):
    patient: PatientOut
    notes: List[ClinicalNoteOut]
    appointments: List[AppointmentOut]
    alerts: List[PatternAlertOut]


class PatientHistoryOut(EntitySchema):
    patient: PatientOut
    notes: List[ClinicalNoteOut]
    appointments: List[AppointmentOut]
    total_visits: int
    last_visit: Optional[str] = None


class PatientBriefOut(BaseModel):
    """Compact roster entry the voice agent reads from."""

    patient_id: str
    name: str
    age: int
    gender: Gender
    conditions: Optional[List[str]] = None


class PatientMatchOut(BaseModel):
    found: bool = True
    patient_id: str
    name: str
    age: int
    gender: Gender
    blood_group: str
    allergies: List[str]
    chronic_conditions: List[str]
    current_medications: List[MedicationOut]
    total_notes: int
    last_visit: Optional[str] = None
    active_alerts: int


class PatientNoMatchOut(BaseModel):
    found: bool = False
    message: str
    available_patients: List[PatientBriefOut]


class PatientListOut(BaseModel):
    patients: List[PatientBriefOut]
    total: int


class LookupPatientRequest(BaseModel):
    name: Optional[str] = Field(None, description="Full or partial patient name")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)


class PatientIdRequest(BaseModel):
    patient_id: str = Field(..., description="Patient ID")

    @field_validator("patient_id")
    @classmethod
    def validate_patient_id(cls, v: str) -> str:
        return required_text(v)
