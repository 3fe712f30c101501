# lingosync\adapters\http\__init__.py
"""
HTTP Adapters (httpx).

Components:
- HttpxTransport: Concrete implementation of IHttpTransport.
- HttpProbeNetworkMonitor / StaticNetworkMonitor: implementations of INetworkMonitor.
"""

from .httpx_transport import HttpxTransport
from .network_monitor import HttpProbeNetworkMonitor, StaticNetworkMonitor

__all__ = [
    "HttpxTransport",
    "HttpProbeNetworkMonitor",
    "StaticNetworkMonitor",
]
