"""
Domain entities package.
"""

from .alert import PatternAlert
from .appointment import Appointment
from .followup import ChannelDelivery, FollowUpItem, FollowUpMessage
from .note import ClinicalNote, SOAPNote
from .patient import EmergencyContact, Medication, Patient
from .summary import PatientSummary, SummaryCacheEntry

__all__ = [
    "Appointment",
    "ChannelDelivery",
    "ClinicalNote",
    "EmergencyContact",
    "FollowUpItem",
    "FollowUpMessage",
    "Medication",
    "Patient",
    "PatientSummary",
    "PatternAlert",
    "SOAPNote",
    "SummaryCacheEntry",
]
