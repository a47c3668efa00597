"""Error taxonomy for product fetching.

Every failure the screen can show is one of these. The client and the state
stream convert them into ``ErrorInfo`` values; none of them reach the UI as
raised exceptions.
"""

from __future__ import annotations

from typing import Optional


class ProductError(Exception):
    """Base class for product fetch failures."""

    kind: str = "unexpected"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class NetworkError(ProductError):
    """Transport-level failure (DNS, timeout, connection reset)."""

    kind = "network"


class HttpError(ProductError):
    """Non-2xx response. The message is the response body."""

    kind = "http"

    def __init__(self, status_code: int, body: str):
        super().__init__(body or f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class UnexpectedError(ProductError):
    """Anything else raised while starting or running a fetch."""

    kind = "unexpected"
