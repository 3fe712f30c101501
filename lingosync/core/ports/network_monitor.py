# lingosync\core\ports\network_monitor.py
from typing import Protocol

class INetworkMonitor(Protocol):
    """Port answering whether the remote service is reachable right now."""

    async def is_available(self) -> bool:
        ...
