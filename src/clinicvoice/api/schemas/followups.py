"""
Follow-up queue and messaging schemas.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ...domain.enums.clinical import (
    DeliveryChannel,
    DeliveryStatus,
    FollowUpMessageType,
    FollowUpStatus,
    Urgency,
)
from .common import EntitySchema, optional_text, required_text


class FollowUpItemOut(EntitySchema):
    patient_id: str
    patient_name: str
    reason: str
    due_date: str
    status: FollowUpStatus
    urgency: Urgency
    last_visit: str


class FollowUpQueueOut(EntitySchema):
    followups: List[FollowUpItemOut]
    total: int
    overdue: int
    upcoming: int


class UpdateFollowUpRequest(BaseModel):
    status: Optional[FollowUpStatus] = Field(None, description="New status")
    due_date: Optional[str] = Field(None, description="New due date (YYYY-MM-DD)")

    @field_validator("due_date")
    @classmethod
    def strip_due_date(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)


class SendFollowUpRequest(BaseModel):
    patient_id: str = Field(..., description="Patient ID")
    message_type: str = Field(
        FollowUpMessageType.APPOINTMENT_REMINDER.value,
        description="appointment_reminder, lab_results or medication_check",
    )
    message: Optional[str] = Field(None, description="Free text that replaces the template body")
    send_email: bool = Field(False, description="Deliver by email")
    send_sms: bool = Field(True, description="Queue an SMS")

    @field_validator("patient_id")
    @classmethod
    def validate_patient_id(cls, v: str) -> str:
        return required_text(v)


class ChannelDeliveryOut(EntitySchema):
    channel: DeliveryChannel
    status: DeliveryStatus
    recipient: Optional[str] = None
    provider_message_id: Optional[str] = None
    detail: Optional[str] = None


class SendFollowUpOut(BaseModel):
    message_id: str
    patient_name: str
    message_type: FollowUpMessageType
    channels: Dict[str, str]
    deliveries: List[ChannelDeliveryOut]
    subject: str
    body: str
    sent_at: str
