"""
In-memory implementation of NoteRepository.
"""

from typing import List

from clinicvoice.application.ports.repositories.note_repo import NoteRepository
from clinicvoice.domain.entities.note import ClinicalNote

from ..store import ClinicStore


class MemoryNoteRepository(NoteRepository):
    """Clinical notes backed by the shared ClinicStore."""

    def __init__(self, store: ClinicStore):
        self._store = store

    async def save(self, note: ClinicalNote) -> ClinicalNote:
        self._store.notes.append(note)
        return note

    async def find_all(self) -> List[ClinicalNote]:
        return list(self._store.notes)

    async def find_by_patient(self, patient_id: str) -> List[ClinicalNote]:
        notes = [n for n in self._store.notes if n.patient_id == patient_id]
        # Same-day notes keep the most recently created first
        return sorted(notes, key=lambda n: (n.date, n.created_at), reverse=True)
