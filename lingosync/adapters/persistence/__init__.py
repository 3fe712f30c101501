# lingosync\adapters\persistence\__init__.py
"""
Persistence Adapters.

This package implements the IAccountStore port defined in the Core Domain.
It handles the translation between Domain Entities and the underlying storage mechanism
(currently the local file system).

Components:
- FileSystemAccountStore: Concrete implementation of IAccountStore using JSON files.
"""

from .filesystem_store import FileSystemAccountStore

__all__ = [
    "FileSystemAccountStore",
]
