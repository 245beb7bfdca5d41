"""
In-memory implementation of FollowUpRepository.
"""

from typing import List, Optional

from clinicvoice.application.ports.repositories.followup_repo import FollowUpRepository
from clinicvoice.domain.entities.followup import FollowUpItem, FollowUpMessage

from ..store import ClinicStore


class MemoryFollowUpRepository(FollowUpRepository):
    """Follow-up queue and message log backed by the shared ClinicStore."""

    def __init__(self, store: ClinicStore):
        self._store = store

    async def find_all(self) -> List[FollowUpItem]:
        return list(self._store.followups)

    async def find_by_patient(self, patient_id: str) -> Optional[FollowUpItem]:
        return next((f for f in self._store.followups if f.patient_id == patient_id), None)

    async def save(self, item: FollowUpItem) -> FollowUpItem:
        for index, existing in enumerate(self._store.followups):
            if existing.patient_id == item.patient_id:
                self._store.followups[index] = item
                return item
        self._store.followups.append(item)
        return item

    async def save_message(self, message: FollowUpMessage) -> FollowUpMessage:
        self._store.messages.append(message)
        return message

    async def find_messages(self, patient_id: Optional[str] = None) -> List[FollowUpMessage]:
        if patient_id is None:
            return list(self._store.messages)
        return [m for m in self._store.messages if m.patient_id == patient_id]
