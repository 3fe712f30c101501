# lingosync\__init__.py
"""
LingoSync - Session & Word-List Synchronization Client.

This package contains a client for a language-learning service following
Hexagonal Architecture (Ports & Adapters): the session orchestrator in
`lingosync.core` talks to the outside world only through ports.
"""

__version__ = "1.0.0"
