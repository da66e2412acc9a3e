"""Pydantic models for API response schemas."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""
    error: str = Field(description="Human-readable error message")


class HealthResponse(BaseModel):
    """Response body for the /health endpoint."""
    status: str = Field(description="Service status")
    version: str = Field(description="API version")
    api_key_configured: bool = Field(description="Whether the Spoonacular API key is set")
