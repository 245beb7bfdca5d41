"""Clinical note entity in SOAP format."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from ..enums.clinical import NoteMode


@dataclass
class SOAPNote:
    subjective: str = ""
    objective: str = ""
    assessment: str = ""
    plan: str = ""


@dataclass
class ClinicalNote:
    """A documented encounter for one patient."""

    id: str
    patient_id: str
    date: str
    mode: NoteMode
    soap: SOAPNote
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClinicalNote":
        return cls(
            id=data["id"],
            patient_id=data["patient_id"],
            date=data["date"],
            mode=NoteMode(data.get("mode", NoteMode.DICTATE.value)),
            soap=SOAPNote(**data.get("soap", {})),
            created_at=data.get("created_at", ""),
        )
