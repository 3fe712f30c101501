# lingosync\shared\container.py
from dependency_injector import containers, providers

from lingosync.shared.config import settings
from lingosync.adapters.background_runner import ThreadPoolBackgroundRunner
from lingosync.adapters.http.httpx_transport import HttpxTransport
from lingosync.adapters.http.network_monitor import HttpProbeNetworkMonitor
from lingosync.adapters.persistence.filesystem_store import FileSystemAccountStore

from lingosync.core.use_cases.account_state import AccountState
from lingosync.core.use_cases.session_orchestrator import SessionOrchestrator

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the client.
    The driving adapter (CLI, GUI) must provide `callbacks`.
    """

    # 1. Configuration
    # We load settings directly, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])
    app_settings = providers.Object(settings)

    # 2. Gateways (Infrastructure Adapters)

    # Transport (Singleton: One connection pool shared)
    transport = providers.Singleton(
        HttpxTransport,
        base_url=config.API_BASE_URL,
        timeout=config.HTTP_TIMEOUT,
    )

    network_monitor = providers.Singleton(
        HttpProbeNetworkMonitor,
        probe_url=config.NETWORK_PROBE_URL,
        base_url=config.API_BASE_URL,
        timeout=config.NETWORK_PROBE_TIMEOUT,
    )

    # Persistence (Singleton: One access point to files)
    account_store = providers.Singleton(
        FileSystemAccountStore,
        base_path=config.STORAGE_PATH,
    )

    background_runner = providers.Singleton(
        ThreadPoolBackgroundRunner,
        max_workers=config.BACKGROUND_WORKERS,
    )

    # 3. Callback Boundary (supplied by the UI layer)
    callbacks = providers.Dependency()

    # 4. Use Cases (Application Logic)

    # Singletons: the account and the orchestrator hold per-user state.
    account_state = providers.Singleton(
        AccountState,
        store=account_store,
    )

    session_orchestrator = providers.Singleton(
        SessionOrchestrator,
        state=account_state,
        transport=transport,
        network=network_monitor,
        callbacks=callbacks,
        runner=background_runner,
        config=app_settings,
    )
