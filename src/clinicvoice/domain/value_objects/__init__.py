"""
Value objects package for domain layer.
"""

from .entity_id import EntityId, new_appointment_id, new_message_id, new_note_id
from .voice_mode import VoiceMode

__all__ = [
    "EntityId",
    "VoiceMode",
    "new_appointment_id",
    "new_message_id",
    "new_note_id",
]
