"""Appointment entity on the clinic calendar."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..enums.clinical import AppointmentStatus, AppointmentType


@dataclass
class Appointment:
    id: str
    patient_id: str
    patient_name: str
    date: str
    time: str
    type: AppointmentType
    reason: str
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    language: str = ""
    # Only set when booked through the service (voice or API)
    created_at: Optional[str] = None

    @property
    def is_scheduled(self) -> bool:
        return self.status == AppointmentStatus.SCHEDULED

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.value
        data["status"] = self.status.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Appointment":
        return cls(
            id=data["id"],
            patient_id=data["patient_id"],
            patient_name=data.get("patient_name", ""),
            date=data["date"],
            time=data["time"],
            type=AppointmentType(data.get("type", AppointmentType.FOLLOW_UP.value)),
            reason=data.get("reason", ""),
            status=AppointmentStatus(data.get("status", AppointmentStatus.SCHEDULED.value)),
            language=data.get("language", ""),
            created_at=data.get("created_at"),
        )
