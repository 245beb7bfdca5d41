"""Follow-up queue items and the record of messages sent for them."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from ...core.utils.datetime_utils import parse_date
from ..enums.clinical import (
    DeliveryChannel,
    DeliveryStatus,
    FollowUpMessageType,
    FollowUpStatus,
    Urgency,
)


@dataclass
class FollowUpItem:
    """A scheduled post-visit contact task."""

    patient_id: str
    patient_name: str
    reason: str
    due_date: str
    status: FollowUpStatus
    urgency: Urgency
    last_visit: str

    def effective_status(self, today: date) -> FollowUpStatus:
        """Upcoming items whose due date has passed are overdue. An unreadable due date never is."""
        if self.status != FollowUpStatus.UPCOMING:
            return self.status
        due = parse_date(self.due_date or "")
        if due is not None and due < today:
            return FollowUpStatus.OVERDUE
        return self.status

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["urgency"] = self.urgency.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FollowUpItem":
        return cls(
            patient_id=data["patient_id"],
            patient_name=data.get("patient_name", ""),
            reason=data.get("reason", ""),
            due_date=data.get("due_date", ""),
            status=FollowUpStatus(data.get("status", FollowUpStatus.UPCOMING.value)),
            urgency=Urgency(data.get("urgency", Urgency.MEDIUM.value)),
            last_visit=data.get("last_visit", ""),
        )


@dataclass
class ChannelDelivery:
    channel: DeliveryChannel
    status: DeliveryStatus
    recipient: Optional[str] = None
    provider_message_id: Optional[str] = None
    detail: Optional[str] = None


@dataclass
class FollowUpMessage:
    """A follow-up message sent to a patient."""

    id: str
    patient_id: str
    patient_name: str
    message_type: FollowUpMessageType
    subject: str
    body: str
    sent_at: str
    deliveries: List[ChannelDelivery] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "patient_id": self.patient_id,
            "patient_name": self.patient_name,
            "message_type": self.message_type.value,
            "subject": self.subject,
            "body": self.body,
            "sent_at": self.sent_at,
            "deliveries": [
                {
                    "channel": d.channel.value,
                    "status": d.status.value,
                    "recipient": d.recipient,
                    "provider_message_id": d.provider_message_id,
                    "detail": d.detail,
                }
                for d in self.deliveries
            ],
        }
