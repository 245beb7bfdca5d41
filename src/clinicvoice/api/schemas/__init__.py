"""
API request and response schemas.
"""

from .common import ApiResponse, EntitySchema, ErrorResponse

__all__ = ["ApiResponse", "EntitySchema", "ErrorResponse"]
