"""
Patient summary cache interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ....domain.entities.summary import PatientSummary, SummaryCacheEntry


class SummaryCache(ABC):
    """Single-entry-per-patient cache for generated summaries."""

    @abstractmethod
    def get(self, patient_id: str) -> Optional[SummaryCacheEntry]:
        """Return the live entry, or None if absent or expired."""
        pass

    @abstractmethod
    def put(self, summary: PatientSummary) -> SummaryCacheEntry:
        """Store a summary, replacing any previous entry for the patient."""
        pass

    @abstractmethod
    def invalidate(self, patient_id: str) -> bool:
        """Drop the patient's entry; True if one existed."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
