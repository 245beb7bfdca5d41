"""Patient domain entity representing a patient on the clinic roster."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from ..enums.clinical import Gender
from ..errors import InvalidPatientDataError


@dataclass
class Medication:
    """A current prescription line."""

    name: str
    dosage: str
    frequency: str

    def describe(self) -> str:
        return f"{self.name} {self.dosage} {self.frequency}".strip()


@dataclass
class EmergencyContact:
    name: str
    relation: str
    phone: str


@dataclass
class Patient:
    """Patient domain entity."""

    id: str
    name: str
    age: int
    gender: Gender
    phone: str
    blood_group: str
    language: str
    allergies: List[str] = field(default_factory=list)
    chronic_conditions: List[str] = field(default_factory=list)
    current_medications: List[Medication] = field(default_factory=list)
    emergency_contact: Optional[EmergencyContact] = None
    email: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate patient data."""
        if not self.name or not self.name.strip():
            raise InvalidPatientDataError("name", self.name)
        if not isinstance(self.age, int) or self.age < 0 or self.age > 120:
            raise InvalidPatientDataError("age", self.age)
        if not isinstance(self.gender, Gender):
            try:
                self.gender = Gender(self.gender)
            except ValueError:
                raise InvalidPatientDataError("gender", self.gender)

    def matches_name(self, query: str) -> bool:
        """Case-insensitive substring match on the full name."""
        return query.lower() in self.name.lower()

    def matches_any_word(self, query: str) -> bool:
        """Fuzzy match: any whitespace-separated word of the query appears in the name."""
        lowered = self.name.lower()
        return any(word in lowered for word in query.lower().split())

    def context_line(self) -> str:
        """One-line briefing handed to the voice agent when a session starts."""
        conditions = ", ".join(self.chronic_conditions) or "None"
        medications = ", ".join(f"{m.name} {m.dosage}" for m in self.current_medications) or "None"
        allergies = ", ".join(self.allergies) or "None"
        return (
            f"Current patient: {self.name}, {self.age}yo {self.gender.value}. "
            f"Conditions: {conditions}. Medications: {medications}. Allergies: {allergies}."
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["gender"] = self.gender.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Patient":
        contact = data.get("emergency_contact")
        return cls(
            id=data["id"],
            name=data["name"],
            age=data["age"],
            gender=Gender(data["gender"]),
            phone=data.get("phone", ""),
            blood_group=data.get("blood_group", ""),
            language=data.get("language", "English"),
            allergies=list(data.get("allergies", [])),
            chronic_conditions=list(data.get("chronic_conditions", [])),
            current_medications=[Medication(**m) for m in data.get("current_medications", [])],
            emergency_contact=EmergencyContact(**contact) if contact else None,
            email=data.get("email"),
        )
