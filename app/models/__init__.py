"""API models for the Random Recipe Proxy."""

from .schemas import ErrorResponse, HealthResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse"
]
