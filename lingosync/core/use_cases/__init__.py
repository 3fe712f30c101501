# lingosync\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. They orchestrate
the flow of data between the Domain Entities and the Infrastructure Ports:
- AccountState keeps the in-memory account in step with local storage.
- SessionOrchestrator gates, dispatches and reconciles every remote call.
"""

from .account_state import AccountState
from .session_orchestrator import SessionOrchestrator

__all__ = [
    "AccountState",
    "SessionOrchestrator",
]
