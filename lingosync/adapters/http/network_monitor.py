# lingosync\adapters\http\network_monitor.py
import time
from typing import Optional

import httpx
import structlog

from lingosync.shared.config import settings

logger = structlog.get_logger()

class HttpProbeNetworkMonitor:
    """
    Driven Adapter: treats the network as available when the service host
    answers a HEAD request (any status). The verdict is cached briefly so a
    burst of operations costs a single probe.
    """

    def __init__(
        self,
        probe_url: Optional[str] = None,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.NETWORK_PROBE_TIMEOUT,
        cache_seconds: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        # Without an explicit probe target, the API host itself is probed
        self.probe_url = probe_url or base_url
        self.cache_seconds = cache_seconds
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._last_result: Optional[bool] = None
        self._last_checked = 0.0

    async def is_available(self) -> bool:
        now = time.monotonic()
        if self._last_result is not None and now - self._last_checked < self.cache_seconds:
            return self._last_result

        try:
            await self._client.head(self.probe_url)
            available = True
        except httpx.TransportError as e:
            logger.info("network_probe_failed", url=self.probe_url, error=repr(e))
            available = False

        self._last_result = available
        self._last_checked = now
        return available

    async def close(self) -> None:
        await self._client.aclose()

class StaticNetworkMonitor:
    """Reports a fixed connectivity state (CLI `--offline`, tests)."""

    def __init__(self, online: bool = True):
        self.online = online

    async def is_available(self) -> bool:
        return self.online
