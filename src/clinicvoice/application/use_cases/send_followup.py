"""Send Follow-up use case: message a patient about their follow-up."""

import logging
from dataclasses import dataclass
from typing import Dict, List

from ...core.exceptions import ConfigurationError
from ...core.utils.datetime_utils import iso_timestamp
from ...domain.entities.followup import ChannelDelivery, FollowUpMessage
from ...domain.entities.patient import Patient
from ...domain.enums.clinical import DeliveryChannel, DeliveryStatus, FollowUpMessageType
from ...domain.errors import NoDeliveryChannelError, PatientNotFoundError
from ...domain.value_objects.entity_id import new_message_id
from ..dto.clinic_dto import SendFollowUpRequest, SendFollowUpResponse
from ..ports.repositories.followup_repo import FollowUpRepository
from ..ports.repositories.patient_repo import PatientRepository
from ..ports.services.email_service import EmailService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageTemplate:
    subject: str
    body: str

    def render(self, patient: Patient, clinic_name: str) -> str:
        return f"{self.body.format(name=patient.name)} — {clinic_name}"


TEMPLATES: Dict[FollowUpMessageType, MessageTemplate] = {
    FollowUpMessageType.APPOINTMENT_REMINDER: MessageTemplate(
        subject="Appointment Reminder",
        body=(
            "Dear {name}, this is a reminder about your upcoming appointment. "
            "Please arrive 10 minutes early and bring any recent lab reports. Reply to confirm."
        ),
    ),
    FollowUpMessageType.LAB_RESULTS: MessageTemplate(
        subject="Lab Results Follow-up",
        body=(
            "Dear {name}, your lab results are ready for review. "
            "Please schedule a visit at your earliest convenience."
        ),
    ),
    FollowUpMessageType.MEDICATION_CHECK: MessageTemplate(
        subject="Medication Check-in",
        body=(
            "Dear {name}, we're checking in on your medication. How are you feeling? "
            "Any side effects? Please reply or call us."
        ),
    ),
}


def resolve_message_type(value: str) -> FollowUpMessageType:
    """Unknown types fall back to an appointment reminder."""
    try:
        return FollowUpMessageType(value)
    except ValueError:
        logger.info(f"Unknown follow-up message type '{value}', using appointment_reminder")
        return FollowUpMessageType.APPOINTMENT_REMINDER


class SendFollowUpUseCase:
    """Render the template, deliver by email and/or SMS, and log the message.

    SMS has no provider; it is recorded as queued for the front desk.
    Email failures from the provider propagate to the caller.
    """

    def __init__(
        self,
        patient_repository: PatientRepository,
        followup_repository: FollowUpRepository,
        email_service: EmailService,
        clinic_name: str,
    ):
        self._patient_repository = patient_repository
        self._followup_repository = followup_repository
        self._email_service = email_service
        self._clinic_name = clinic_name

    async def execute(self, request: SendFollowUpRequest) -> SendFollowUpResponse:
        if not request.send_email and not request.send_sms:
            raise NoDeliveryChannelError()

        patient = await self._patient_repository.find_by_id(request.patient_id)
        if not patient:
            raise PatientNotFoundError(request.patient_id)

        message_type = resolve_message_type(request.message_type or "")
        template = TEMPLATES[message_type]
        subject = f"{template.subject} — {self._clinic_name}"
        body = request.message.strip() if request.message and request.message.strip() else None
        body = body or template.render(patient, self._clinic_name)

        deliveries: List[ChannelDelivery] = []
        if request.send_email:
            deliveries.append(await self._deliver_email(patient, subject, body))
        if request.send_sms:
            deliveries.append(
                ChannelDelivery(
                    channel=DeliveryChannel.SMS,
                    status=DeliveryStatus.QUEUED,
                    recipient=patient.phone or None,
                )
            )

        record = FollowUpMessage(
            id=new_message_id(),
            patient_id=patient.id,
            patient_name=patient.name,
            message_type=message_type,
            subject=subject,
            body=body,
            sent_at=iso_timestamp(),
            deliveries=deliveries,
        )
        await self._followup_repository.save_message(record)
        channels = {d.channel.value: d.status.value for d in deliveries}
        logger.info(f"Follow-up {record.id} for patient={patient.id} type={message_type.value} channels={channels}")

        return SendFollowUpResponse(record=record, channels=channels)

    async def _deliver_email(self, patient: Patient, subject: str, body: str) -> ChannelDelivery:
        if not patient.email:
            return ChannelDelivery(
                channel=DeliveryChannel.EMAIL,
                status=DeliveryStatus.SKIPPED,
                detail="No email address on file",
            )
        try:
            provider_id = await self._email_service.send_email(patient.email, subject, body)
        except ConfigurationError as e:
            logger.warning(f"Email not sent for patient={patient.id}: {e.message}")
            return ChannelDelivery(
                channel=DeliveryChannel.EMAIL,
                status=DeliveryStatus.SKIPPED,
                recipient=patient.email,
                detail="Email delivery is not configured",
            )
        return ChannelDelivery(
            channel=DeliveryChannel.EMAIL,
            status=DeliveryStatus.SENT,
            recipient=patient.email,
            provider_message_id=provider_id,
        )
