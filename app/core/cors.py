"""Origin allow-list and CORS response headers."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

ALLOWED_METHODS = "GET, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


@dataclass(frozen=True)
class OriginPolicy:
    """Origins trusted to read responses cross-site.

    An origin is trusted when it equals one of ``exact_origins``, ends with
    one of ``suffixes``, or contains one of ``markers`` anywhere.
    """
    exact_origins: FrozenSet[str] = field(default_factory=frozenset)
    suffixes: FrozenSet[str] = field(default_factory=frozenset)
    markers: FrozenSet[str] = field(default_factory=frozenset)

    def is_allowed(self, origin: Optional[str]) -> bool:
        if not origin:
            return False
        if origin in self.exact_origins:
            return True
        if any(origin.endswith(suffix) for suffix in self.suffixes):
            return True
        return any(marker in origin for marker in self.markers)


def cors_headers(origin: Optional[str], policy: OriginPolicy) -> Dict[str, str]:
    """Return the CORS headers for ``origin``, or an empty dict if untrusted."""
    if not policy.is_allowed(origin):
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Vary": "Origin",
    }
