"""Common request and response schemas."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str = Field(..., description="Human readable failure message.")


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
