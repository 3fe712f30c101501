# lingosync\core\__init__.py
"""
Core Domain Layer.

This package contains the pure client logic and entities of the system.
It strictly follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on the HTTP library, the file system or any UI toolkit.
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
