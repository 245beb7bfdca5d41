"""
Text-to-speech and voice agent schemas.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .common import EntitySchema, optional_text, required_text


class TTSRequest(BaseModel):
    text: str = Field(..., description="Text to speak")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return required_text(v)


class VoiceModeOut(BaseModel):
    mode: str
    label: str
    system_prompt: str
    first_message: str
    client_tools: List[str]
    server_tools: Dict[str, str]


class VoiceSessionRequest(BaseModel):
    mode: str = Field(..., description="dictate, summarize, pattern, booking or followup")
    patient_id: Optional[str] = Field(None, description="Patient in context")

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        return required_text(v)

    @field_validator("patient_id")
    @classmethod
    def strip_patient_id(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)


class VoiceSessionOut(EntitySchema):
    mode: str
    label: str
    agent_id: str
    signed_url: str
    system_prompt: str
    first_message: str
    context: Optional[str] = None


class ClientToolOut(BaseModel):
    tool: str
    result: str
    display: Dict[str, Any]
