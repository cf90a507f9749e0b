"""Standardized error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body for failed registry operations (4xx)."""

    detail: str = Field(..., description="Human-readable error message, naming the offending ID or field")
    code: str = Field(..., description="Machine-readable error code")
