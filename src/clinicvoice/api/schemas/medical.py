"""
Clinical notes, summaries and pattern alert schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ...domain.enums.clinical import AlertSeverity, NoteMode
from .common import EntitySchema, optional_text, required_text


class SOAPNoteOut(EntitySchema):
    subjective: str
    objective: str
    assessment: str
    plan: str


class ClinicalNoteOut(EntitySchema):
    id: str
    patient_id: str
    date: str
    mode: NoteMode
    soap: SOAPNoteOut
    created_at: str


class SaveNoteRequest(BaseModel):
    patient_id: str = Field(..., description="Patient ID")
    subjective: str = Field(..., description="Patient's complaints in their words")
    objective: Optional[str] = Field(None, description="Vitals and examination findings")
    assessment: str = Field(..., description="Diagnosis or differentials")
    plan: Optional[str] = Field(None, description="Treatment plan")
    mode: NoteMode = Field(NoteMode.DICTATE, description="How the note was produced")

    @field_validator("patient_id", "subjective", "assessment")
    @classmethod
    def validate_required(cls, v: str) -> str:
        return required_text(v)

    @field_validator("objective", "plan")
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)


class SaveNoteOut(EntitySchema):
    note_id: str
    soap: SOAPNoteOut
    message: str


class SummaryOut(EntitySchema):
    patient_name: str
    summary_text: str
    key_concerns: List[str]
    last_visit_date: Optional[str] = None
    total_visits: int
    generated_at: str
    cached: bool


class PatternAlertOut(EntitySchema):
    id: str
    patient_id: str
    patient_name: str
    severity: AlertSeverity
    title: str
    description: str
    recommendation: str
    created_at: str


class CheckPatternsRequest(BaseModel):
    patient_id: Optional[str] = Field(None, description='Patient ID, or "all"')

    @field_validator("patient_id")
    @classmethod
    def strip_patient_id(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)


class PatternCheckOut(EntitySchema):
    alerts: List[PatternAlertOut]
    total: int
    critical: int
    warnings: int
    info: int
