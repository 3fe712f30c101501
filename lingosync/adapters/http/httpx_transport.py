# lingosync/adapters/http/httpx_transport.py
from typing import Optional

import httpx
import structlog

from lingosync.core.domain.exceptions import TransportFailureError
from lingosync.core.ports.http_transport import HttpRequest, HttpResponse
from lingosync.shared.config import settings
from lingosync.shared.resilience import request_retry_policy
from lingosync.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class HttpxTransport:
    """
    Driven Adapter: sends requests to the remote service with httpx.

    Every non-2xx status and every connection problem surfaces as a
    TransportFailureError; requests with `retries > 0` are retried on
    connection problems only.
    """

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.HTTP_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
        retry_wait: float = 1.0,
    ):
        self.base_url = base_url
        self.retry_wait = retry_wait
        # Async HTTP client with strict timeouts
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def send(self, request: HttpRequest) -> HttpResponse:
        async for attempt in request_retry_policy(request.retries, self.retry_wait):
            with attempt:
                return await self._send_once(request)

    async def _send_once(self, request: HttpRequest) -> HttpResponse:
        timeout = request.timeout if request.timeout is not None else httpx.USE_CLIENT_DEFAULT

        with tracer.start_as_current_span("http.request") as span:
            span.set_attribute("http.method", request.method)
            span.set_attribute("app.operation", request.operation)

            try:
                response = await self._client.request(
                    request.method,
                    request.path,
                    params=request.params or None,
                    data=request.form,
                    json=request.json_body,
                    timeout=timeout,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                span.set_attribute("http.status_code", status)
                logger.debug("http_error_status", operation=request.operation, status=status)
                raise TransportFailureError(
                    request.operation,
                    e.response.text[:200] or e.response.reason_phrase,
                    status_code=status,
                )
            except httpx.HTTPError as e:
                span.record_exception(e)
                logger.debug("http_transport_error", operation=request.operation, error=repr(e))
                raise TransportFailureError(request.operation, str(e) or type(e).__name__)

            span.set_attribute("http.status_code", response.status_code)
            return HttpResponse(
                operation=request.operation,
                status_code=response.status_code,
                text=response.text,
            )

    async def close(self) -> None:
        await self._client.aclose()
