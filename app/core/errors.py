"""Errors surfaced to clients of the recipe proxy."""

import json
from typing import Any, Dict, Optional


class RecipeProxyError(Exception):
    """Base class for errors returned to the client as ``{"error": ...}``."""

    status_code: int = 500
    default_message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.message}


class MethodNotAllowedError(RecipeProxyError):
    """The endpoint was called with a method other than GET or OPTIONS."""
    status_code = 405
    default_message = "Method Not Allowed. This endpoint only supports GET requests."


class ConfigurationError(RecipeProxyError):
    """The upstream API key is not configured."""
    default_message = "API key not configured on the server. Please contact the administrator."


class UpstreamAuthError(RecipeProxyError):
    """Upstream rejected the API key (401)."""
    default_message = (
        "Unauthorized: Invalid API Key or missing API Key. "
        "Please check Vercel environment variables."
    )


class UpstreamQuotaError(RecipeProxyError):
    """Upstream quota exhausted (402)."""
    default_message = "Payment Required: API quota exceeded. Try again later."


class NoResultsError(RecipeProxyError):
    """No recipe matched the requested filters."""
    default_message = "No recipes found for the given criteria. Try adjusting your selections."

    @classmethod
    def from_not_found(cls) -> "NoResultsError":
        return cls("No recipes found. Try broader filters.")


class UpstreamError(RecipeProxyError):
    """Any other non-success response from upstream."""

    def __init__(self, status_code: int, reason: str, details: Any):
        self.upstream_status = status_code
        self.upstream_reason = reason
        self.details = details
        super().__init__(
            f"Failed to fetch recipe: {status_code} - {reason}. "
            f"Details: {json.dumps(details, separators=(',', ':'), ensure_ascii=False)}"
        )


class TransportError(RecipeProxyError):
    """Upstream could not be reached or returned an unreadable body."""
    default_message = "An unexpected error occurred. Please check your network connection."
