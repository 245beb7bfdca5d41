"""
Voice mode value object: one dialog configuration of the voice assistant.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from ..enums.clinical import MedMode


@dataclass(frozen=True)
class VoiceMode:
    """Prompt, opening line and tools the agent is given for one mode."""

    mode: MedMode
    label: str
    system_prompt: str
    first_message: str
    # Rendered in the browser
    client_tools: Tuple[str, ...] = ()
    # Tool name -> backend endpoint the platform calls
    server_tools: Dict[str, str] = field(default_factory=dict)
