"""Pattern alert entity: a flagged clinical observation with a suggested action."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from ..enums.clinical import AlertSeverity


@dataclass
class PatternAlert:
    id: str
    patient_id: str
    patient_name: str
    severity: AlertSeverity
    title: str
    description: str
    recommendation: str
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PatternAlert":
        return cls(
            id=data["id"],
            patient_id=data["patient_id"],
            patient_name=data.get("patient_name", ""),
            severity=AlertSeverity(data.get("severity", AlertSeverity.INFO.value)),
            title=data.get("title", ""),
            description=data.get("description", ""),
            recommendation=data.get("recommendation", ""),
            created_at=data.get("created_at", ""),
        )
