"""
Pattern alert repository interface.
"""

from abc import ABC, abstractmethod
from typing import List

from ....domain.entities.alert import PatternAlert


class AlertRepository(ABC):
    """Abstract repository for pattern alerts."""

    @abstractmethod
    async def find_all(self) -> List[PatternAlert]:
        pass

    @abstractmethod
    async def find_by_patient(self, patient_id: str) -> List[PatternAlert]:
        pass
