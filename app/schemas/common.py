"""
Envelopes shared by every router: the error body and the delete acknowledgement.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""
    model_config = ConfigDict(from_attributes=True)

    code: str = Field(examples=["VALIDATION_ERROR"])
    message: str = Field(description="Human-readable reason; always present.")
    details: Optional[dict[str, Any]] = None


class SuccessResponse(BaseModel):
    """Returned by delete endpoints whether or not the row existed."""
    success: bool = True


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Validation error."},
    500: {"model": ErrorResponse, "description": "Store or unexpected failure."},
}
