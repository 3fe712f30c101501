# lingosync/core/ports/http_transport.py
from __future__ import annotations

import json
from typing import Any, Dict, Optional, Protocol

from pydantic import BaseModel, Field

from lingosync.core.domain.exceptions import PayloadMalformedError

class HttpRequest(BaseModel):
    """
    A single call against the remote service.

    `path` is relative to the configured base URL. Exactly one of `form`
    (url-encoded body) or `json_body` is sent, if any.
    """
    operation: str = Field(..., description="Short name used in logs and errors")
    method: str = "POST"
    path: str
    params: Dict[str, str] = Field(default_factory=dict)
    form: Optional[Dict[str, str]] = None
    json_body: Optional[Dict[str, Any]] = None
    timeout: Optional[float] = None
    retries: int = 0

class HttpResponse(BaseModel):
    operation: str
    status_code: int
    text: str

    def json(self) -> Any:
        try:
            return json.loads(self.text)
        except ValueError as e:
            raise PayloadMalformedError(self.operation, f"invalid JSON: {e}")

class IHttpTransport(Protocol):
    """
    Port for the generic "HTTP request" capability.
    Implementations own queueing, connection reuse and retries.
    """

    async def send(self, request: HttpRequest) -> HttpResponse:
        """
        Performs the request and returns the successful (2xx) response.

        Raises:
            TransportFailureError: On connection errors, timeouts or error statuses.
        """
        ...

    async def close(self) -> None:
        """Releases pooled connections."""
        ...
