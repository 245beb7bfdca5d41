"""
Appointment, schedule, dashboard and analytics schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ...domain.enums.clinical import AppointmentStatus, AppointmentType
from .common import EntitySchema, optional_text, required_text


class AppointmentOut(EntitySchema):
    id: str
    patient_id: str
    patient_name: str
    date: str
    time: str
    type: AppointmentType
    reason: str
    status: AppointmentStatus
    language: str = ""
    created_at: Optional[str] = None


class CheckScheduleRequest(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    time: str = Field(..., description="e.g. 10:30 AM or 14:00")

    @field_validator("date", "time")
    @classmethod
    def validate_required(cls, v: str) -> str:
        return required_text(v)


class ScheduleCheckOut(EntitySchema):
    available: bool
    date: str
    time: str
    message: str
    reason: Optional[str] = None
    alternatives: List[str] = Field(default_factory=list)


class BookAppointmentRequest(BaseModel):
    patient_id: str = Field(..., description="Patient ID")
    patient_name: Optional[str] = Field(None, description="Name override")
    date: str = Field(..., description="YYYY-MM-DD")
    time: str = Field(..., description="e.g. 10:30 AM")
    type: AppointmentType = Field(AppointmentType.FOLLOW_UP, description="Appointment type")
    reason: str = Field(..., description="Reason for visit")
    language: Optional[str] = Field(None, description="Consultation language")

    @field_validator("patient_id", "date", "time", "reason")
    @classmethod
    def validate_required(cls, v: str) -> str:
        return required_text(v)

    @field_validator("patient_name", "language")
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)


class BookAppointmentOut(BaseModel):
    appointment_id: str
    patient_name: str
    date: str
    time: str
    type: AppointmentType
    reason: str
    message: str
    appointment: AppointmentOut


class UpdateAppointmentStatusRequest(BaseModel):
    status: AppointmentStatus = Field(..., description="New status")


class DashboardStatsOut(EntitySchema):
    todayCount: int
    weekCount: int
    patientCount: int


class VolumeBucketOut(EntitySchema):
    period: str
    label: str
    total: int
    follow_up: int
    new_consultation: int
    procedure: int
    lab_review: int


class LabeledCountOut(EntitySchema):
    name: str
    value: int


class AnalyticsTotalsOut(EntitySchema):
    total_appointments: int
    unique_days: int
    avg_per_day: float
    voice_booked: int
    unique_languages: int
    patient_count: int


class AnalyticsRatesOut(EntitySchema):
    completion_rate: float
    cancellation_rate: float
    no_show_rate: float


class AnalyticsOut(EntitySchema):
    granularity: str
    totals: AnalyticsTotalsOut
    rates: AnalyticsRatesOut
    volume: List[VolumeBucketOut]
    by_type: List[LabeledCountOut]
    by_language: List[LabeledCountOut]
    by_time_slot: List[LabeledCountOut]
