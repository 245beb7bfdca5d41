"""
Appointment repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.appointment import Appointment


class AppointmentRepository(ABC):
    """Abstract repository for calendar appointments."""

    @abstractmethod
    async def save(self, appointment: Appointment) -> Appointment:
        """Insert a new appointment or replace the one with the same ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Appointment]:
        pass

    @abstractmethod
    async def find_by_id(self, appointment_id: str) -> Optional[Appointment]:
        pass

    @abstractmethod
    async def find_by_patient(self, patient_id: str) -> List[Appointment]:
        pass

    @abstractmethod
    async def find_by_date(self, date: str) -> List[Appointment]:
        pass
