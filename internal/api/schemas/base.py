"""Base schemas for API responses."""

from typing import List

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One field-level validation problem."""

    field: str = Field(description="Dotted path of the offending field")
    message: str = Field(description="Error message")


class ValidationErrorResponse(BaseModel):
    success: bool = Field(default=False)
    error: str = Field(default="Invalid request data")
    details: List[ErrorDetail] = Field(default_factory=list)


class FailureResponse(BaseModel):
    success: bool = Field(default=False, description="Always false for error responses")
    error: str = Field(description="Human-readable error message")
