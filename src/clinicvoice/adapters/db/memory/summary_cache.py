"""
In-memory implementation of the patient summary cache.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, Optional

from clinicvoice.application.ports.repositories.summary_cache import SummaryCache
from clinicvoice.core.utils.datetime_utils import get_current_timestamp
from clinicvoice.domain.entities.summary import PatientSummary, SummaryCacheEntry

logger = logging.getLogger(__name__)


class InMemorySummaryCache(SummaryCache):
    """Dict keyed by patient ID; entries expire after ``ttl_seconds`` (0 = never)."""

    def __init__(self, ttl_seconds: int = 0, clock: Callable[[], datetime] = get_current_timestamp) -> None:
        self._entries: Dict[str, SummaryCacheEntry] = {}
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    def get(self, patient_id: str) -> Optional[SummaryCacheEntry]:
        entry = self._entries.get(patient_id)
        if entry is None:
            return None
        if self._ttl_seconds and entry.age_seconds(self._clock()) >= self._ttl_seconds:
            logger.debug(f"Summary cache entry expired for patient={patient_id}")
            del self._entries[patient_id]
            return None
        return entry

    def put(self, summary: PatientSummary) -> SummaryCacheEntry:
        entry = SummaryCacheEntry(summary=summary, generated_at=self._clock())
        self._entries[summary.patient_id] = entry
        return entry

    def invalidate(self, patient_id: str) -> bool:
        removed = self._entries.pop(patient_id, None) is not None
        if removed:
            logger.debug(f"Summary cache invalidated for patient={patient_id}")
        return removed

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
