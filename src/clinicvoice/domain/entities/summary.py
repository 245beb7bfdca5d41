"""Generated patient summary, the payload held in the per-patient summary cache."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class PatientSummary:
    patient_id: str
    patient_name: str
    summary_text: str
    key_concerns: List[str]
    last_visit_date: Optional[str]
    total_visits: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SummaryCacheEntry:
    """One cached summary per patient, stamped with its generation time."""

    summary: PatientSummary
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def age_seconds(self, now: datetime) -> float:
        return (now - self.generated_at).total_seconds()
