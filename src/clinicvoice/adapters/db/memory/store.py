"""
In-process clinic data store.

Holds patients, notes, appointments, pattern alerts, follow-ups and the
sent-message log as plain lists mutated in place, seeded from JSON files.
Lookups are linear scans; nothing is persisted.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from clinicvoice.domain.entities import (
    Appointment,
    ClinicalNote,
    FollowUpItem,
    FollowUpMessage,
    Patient,
    PatternAlert,
)

from .summary_cache import InMemorySummaryCache

logger = logging.getLogger(__name__)

DEFAULT_SEED_DIR = Path(__file__).parent / "seed"


def _read_seed(seed_dir: Path, name: str) -> List[Any]:
    path = seed_dir / f"{name}.json"
    if not path.exists():
        logger.warning(f"Seed file missing, starting empty: {path}")
        return []
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


class ClinicStore:
    """Mutable in-memory collections shared by the memory repositories."""

    def __init__(self, seed_dir: Optional[Path] = None, summary_cache_ttl_seconds: int = 0) -> None:
        self._seed_dir = Path(seed_dir) if seed_dir else DEFAULT_SEED_DIR
        self.patients: List[Patient] = []
        self.notes: List[ClinicalNote] = []
        self.appointments: List[Appointment] = []
        self.alerts: List[PatternAlert] = []
        self.followups: List[FollowUpItem] = []
        self.messages: List[FollowUpMessage] = []
        self.summary_cache = InMemorySummaryCache(ttl_seconds=summary_cache_ttl_seconds)
        self.reset()

    @property
    def seed_dir(self) -> Path:
        return self._seed_dir

    def reset(self) -> None:
        """Reload every collection from the seed files and empty the summary cache."""
        self.patients = [Patient.from_dict(p) for p in _read_seed(self._seed_dir, "patients")]
        self.notes = [ClinicalNote.from_dict(n) for n in _read_seed(self._seed_dir, "notes")]
        self.appointments = [Appointment.from_dict(a) for a in _read_seed(self._seed_dir, "appointments")]
        self.alerts = [PatternAlert.from_dict(a) for a in _read_seed(self._seed_dir, "alerts")]
        self.followups = [FollowUpItem.from_dict(f) for f in _read_seed(self._seed_dir, "followups")]
        self.messages = []
        self.summary_cache.clear()
        logger.info(
            f"Clinic store seeded from {self._seed_dir}: patients={len(self.patients)} "
            f"notes={len(self.notes)} appointments={len(self.appointments)} "
            f"alerts={len(self.alerts)} followups={len(self.followups)}"
        )
