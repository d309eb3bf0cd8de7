"""Error taxonomy for the conversion proxy.

Every failure surfaced to a client is a :class:`ProxyError` subclass. The
exception carries a locale key (rendered at the request boundary) and, for
upstream failures, the raw upstream message which is passed through as is.

Hierarchy
---------
ProxyError
├── InputValidationError   400
├── UpstreamRateLimited    429
└── UpstreamFailure        500
"""

from typing import Any, Optional


class ProxyError(Exception):
    """Base exception for all conversion proxy errors."""

    status_code: int = 500
    default_key: str = "error.internal"

    def __init__(self, key: Optional[str] = None, *, message: Optional[str] = None, **params: Any) -> None:
        self.key = key or self.default_key
        self.message = message
        self.params = params
        super().__init__(message or self.key)


class InputValidationError(ProxyError):
    """Raised when the url, type or quality parameter is missing or invalid."""

    status_code = 400
    default_key = "error.invalid_request"


class UpstreamRateLimited(ProxyError):
    """Raised when the conversion service reports throttling."""

    status_code = 429
    default_key = "error.rate_limited"

    def __init__(self, retry_after: int, key: Optional[str] = None, **params: Any) -> None:
        super().__init__(key, **params)
        self.retry_after = retry_after


class UpstreamFailure(ProxyError):
    """Raised for any other upstream-reported failure or network fault."""

    status_code = 500
    default_key = "error.internal"
