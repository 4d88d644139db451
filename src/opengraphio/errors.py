"""Exception types raised by the OpenGraph.io SDK."""

from __future__ import annotations

from typing import Any, Dict, Optional


class OpenGraphError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(OpenGraphError):
    """Raised when a client configuration is missing a required option."""


class TransportError(OpenGraphError):
    """A request to the API failed before a usable JSON body came back.

    Wraps the underlying ``httpx`` exception (also chained as ``__cause__``).
    ``status_code`` and ``payload`` are set when the API answered with a
    non-2xx status; ``payload`` holds its decoded JSON body, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.url = url
        self.status_code = status_code
        self.payload = payload

    def as_response(self) -> Dict[str, Any]:
        """Render the failure as a response-shaped mapping."""
        if isinstance(self.payload, dict):
            return dict(self.payload)
        error: Dict[str, Any] = {"message": self.message}
        if self.status_code is not None:
            error["code"] = self.status_code
        if self.url is not None:
            error["url"] = self.url
        return {"error": error}

    def __repr__(self) -> str:
        return f"TransportError({self.message!r}, status_code={self.status_code!r})"


__all__ = ["OpenGraphError", "ConfigurationError", "TransportError"]
