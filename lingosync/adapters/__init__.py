# lingosync\adapters\__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in `lingosync.core.ports`.
These adapters connect the client to the outside world:
- `cli`: The Primary Adapter (Driving) - argparse command line.
- `console_callbacks`: Driven - prints orchestrator notifications.
- `http`: Driven - httpx transport and connectivity probe.
- `persistence`: Driven - local JSON account store.
- `background_runner`: Driven - thread pool for CPU-bound reshaping.

In Hexagonal Architecture, dependencies point INWARD. These modules depend on `lingosync.core`,
but `lingosync.core` never imports from here.
"""
