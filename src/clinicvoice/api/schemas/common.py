"""
Common schemas and reusable components for the API envelope.
"""

import uuid
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ...core.utils.datetime_utils import iso_timestamp

T = TypeVar("T")

# ============================================================================
# BASE RESPONSE SCHEMAS
# ============================================================================


class ApiResponse(BaseModel, Generic[T]):
    success: bool = Field(True, description="Operation success status")
    message: str = Field("", description="Response message")
    timestamp: str = Field(default_factory=iso_timestamp, description="Response timestamp")
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Request ID for tracking")
    data: Optional[T] = Field(None, description="Response payload")


class ErrorResponse(BaseModel):
    """Standardized error response schema."""

    success: bool = Field(False, description="Operation success status")
    error: str = Field(..., description="Error type/code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: str = Field(default_factory=iso_timestamp, description="Error timestamp")
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Request ID for tracking")


# ============================================================================
# REUSABLE COMPONENT SCHEMAS
# ============================================================================


class EntitySchema(BaseModel):
    """Base for response schemas read straight off domain dataclasses."""

    model_config = ConfigDict(from_attributes=True)


def required_text(value: Optional[str]) -> str:
    """Shared validator body: strip and reject blank strings."""
    stripped = (value or "").strip()
    if not stripped:
        raise ValueError("must not be blank")
    return stripped


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None
