# tests\conftest.py
import json
from typing import Any, Callable, Dict, List, Union
from unittest.mock import AsyncMock, MagicMock

import pytest

from lingosync.core.domain.models import Account, Credentials, LanguagePair
from lingosync.core.ports.account_store import IAccountStore
from lingosync.core.ports.http_transport import HttpRequest, HttpResponse, IHttpTransport
from lingosync.core.ports.network_monitor import INetworkMonitor
from lingosync.core.ports.session_callbacks import ISessionCallbacks
from lingosync.shared.container import Container

EMAIL = "ada@example.com"
PASSWORD = "secret"
TOKEN = "tok-123"

Route = Union[str, Exception, Callable[[HttpRequest], Any]]

def ok(text: Any = "OK", operation: str = "test") -> HttpResponse:
    """Builds a 200 response; non-string bodies are JSON encoded."""
    if not isinstance(text, str):
        text = json.dumps(text)
    return HttpResponse(operation=operation, status_code=200, text=text)

def route(transport: MagicMock, routes: Dict[str, Route]) -> None:
    """
    Makes transport.send answer by request operation.
    A route value is a body, an exception to raise, or a callable.
    """
    async def send(request: HttpRequest) -> HttpResponse:
        answer = routes[request.operation]
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            answer = answer(request)
        return ok(answer, request.operation)

    transport.send.side_effect = send

def sent_operations(transport: MagicMock) -> List[str]:
    return [c.args[0].operation for c in transport.send.await_args_list]

def sent_request(transport: MagicMock, operation: str) -> HttpRequest:
    for c in transport.send.await_args_list:
        if c.args[0].operation == operation:
            return c.args[0]
    raise AssertionError(f"no '{operation}' request was sent")

class InlineRunner:
    """Background runner that runs the transform immediately."""

    async def run(self, fn, *args):
        return fn(*args)

    def shutdown(self) -> None:
        pass

@pytest.fixture(scope="function")
def mock_transport():
    """Returns a mock HTTP transport; configure answers with `route`."""
    transport = MagicMock(spec=IHttpTransport)
    transport.send = AsyncMock()
    transport.close = AsyncMock()
    return transport

@pytest.fixture(scope="function")
def mock_store():
    """Returns a mock Account Store that starts out empty."""
    store = MagicMock(spec=IAccountStore)
    store.load_credentials = AsyncMock(return_value=Credentials())
    store.save_credentials = AsyncMock()
    store.clear_credentials = AsyncMock()
    store.load_languages = AsyncMock(return_value=LanguagePair())
    store.save_languages = AsyncMock()
    store.load_word_tree = AsyncMock(return_value=[])
    store.save_word_tree = AsyncMock()
    return store

@pytest.fixture(scope="function")
def mock_network():
    network = MagicMock(spec=INetworkMonitor)
    network.is_available = AsyncMock(return_value=True)
    return network

@pytest.fixture(scope="function")
def mock_callbacks():
    return MagicMock(spec=ISessionCallbacks)

@pytest.fixture(scope="function")
def container(mock_transport, mock_store, mock_network, mock_callbacks):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides real infrastructure providers with the mocks defined above.
    """
    container = Container()

    container.transport.override(mock_transport)
    container.account_store.override(mock_store)
    container.network_monitor.override(mock_network)
    container.background_runner.override(InlineRunner())
    container.callbacks.override(mock_callbacks)

    yield container

    container.reset_singletons()
    container.unwire()

@pytest.fixture
def orchestrator(container):
    return container.session_orchestrator()

@pytest.fixture
def in_session(orchestrator):
    """Puts a logged-in user with an active session and languages into the orchestrator."""
    orchestrator.state.account = Account(
        email=EMAIL,
        password=PASSWORD,
        session_token=TOKEN,
        native_language="en",
        learning_language="de",
    )
    return orchestrator.state.account

@pytest.fixture
def logged_out_of_session(orchestrator):
    """Credentials are stored but no session token has been acquired."""
    orchestrator.state.account = Account(email=EMAIL, password=PASSWORD)
    return orchestrator.state.account

@pytest.fixture
def sample_days():
    """A bookmarks_by_day payload as the server sends it."""
    def bookmark(id_, word, title, url="http://a.example"):
        return {
            "id": id_,
            "from": word,
            "to": [f"{word}-en", "alt"],
            "from_lang": "de",
            "to_lang": "en",
            "title": title,
            "url": url,
            "context": f"... {word} ...",
        }
    return [
        {
            "date": "2024-01-01",
            "bookmarks": [
                bookmark(1, "Haus", "A"),
                bookmark(2, "Baum", "A"),
                bookmark(3, "Hund", "B", "http://b.example"),
            ],
        },
        {"date": "2023-12-31", "bookmarks": []},
    ]
