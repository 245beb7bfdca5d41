"""
Follow-up repository interface: the follow-up queue and the sent-message log.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.followup import FollowUpItem, FollowUpMessage


class FollowUpRepository(ABC):
    """Abstract repository for follow-up tasks and messages."""

    @abstractmethod
    async def find_all(self) -> List[FollowUpItem]:
        pass

    @abstractmethod
    async def find_by_patient(self, patient_id: str) -> Optional[FollowUpItem]:
        pass

    @abstractmethod
    async def save(self, item: FollowUpItem) -> FollowUpItem:
        """Insert or replace the follow-up for ``item.patient_id``."""
        pass

    @abstractmethod
    async def save_message(self, message: FollowUpMessage) -> FollowUpMessage:
        pass

    @abstractmethod
    async def find_messages(self, patient_id: Optional[str] = None) -> List[FollowUpMessage]:
        pass
