"""
Entity ID value object for type-safe record identification.
Format: {prefix}_{base36 millisecond timestamp}
"""

import re
import threading
import time
from dataclasses import dataclass
from typing import Any

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_last_stamp = 0
_lock = threading.Lock()


def to_base36(number: int) -> str:
    """Lowercase base36 rendering of a non-negative integer."""
    if number < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


def _next_stamp() -> int:
    """Millisecond clock, bumped so two IDs generated in one tick still differ."""
    global _last_stamp
    with _lock:
        stamp = max(int(time.time() * 1000), _last_stamp + 1)
        _last_stamp = stamp
        return stamp


@dataclass(frozen=True)
class EntityId:
    """Immutable record identifier value object."""

    value: str

    def __post_init__(self) -> None:
        """Validate ID format."""
        if not self.value:
            raise ValueError("Entity ID cannot be empty")

        if not isinstance(self.value, str):
            raise ValueError("Entity ID must be a string")

        if not re.match(r"^[a-z]+_[0-9a-z]+$", self.value):
            raise ValueError("Entity ID must follow format: {prefix}_{suffix}")

    def __str__(self) -> str:
        """String representation."""
        return self.value

    def __eq__(self, other: Any) -> bool:
        """Equality comparison."""
        if not isinstance(other, EntityId):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        """Hash for use in sets and dictionaries."""
        return hash(self.value)

    @property
    def prefix(self) -> str:
        return self.value.split("_", 1)[0]

    @classmethod
    def generate(cls, prefix: str) -> "EntityId":
        """Generate a new ID such as ``note_lz3k9x1a``."""
        return cls(f"{prefix}_{to_base36(_next_stamp())}")


def new_note_id() -> str:
    return EntityId.generate("note").value


def new_appointment_id() -> str:
    return EntityId.generate("apt").value


def new_message_id() -> str:
    return EntityId.generate("msg").value
