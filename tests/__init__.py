# tests\__init__.py
"""
Test Suite for LingoSync.

Organization:
- `core`: Tests for Core Logic (Use Cases, Domain Models) with mocked ports.
- `adapters`: Tests for Adapters (httpx transport, file store, CLI) using
  httpx.MockTransport and temporary directories.
- `shared`: Tests for configuration, retry policies and the DI container.
"""
