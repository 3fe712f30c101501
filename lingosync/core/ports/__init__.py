# lingosync\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement. These interfaces allow the Core Domain to interact with the
outside world (HTTP, local storage, connectivity, threads, UI) without
knowing the implementation details.
"""

from .account_store import IAccountStore
from .background_runner import IBackgroundRunner
from .http_transport import HttpRequest, HttpResponse, IHttpTransport
from .network_monitor import INetworkMonitor
from .session_callbacks import ISessionCallbacks

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "IAccountStore",
    "IBackgroundRunner",
    "IHttpTransport",
    "INetworkMonitor",
    "ISessionCallbacks",
]
