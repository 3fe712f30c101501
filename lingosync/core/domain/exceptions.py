# lingosync/core/domain/exceptions.py
from typing import Optional

class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Precondition Errors (raised by the request gates) ---

class NotLoggedInError(DomainError):
    """Raised when an operation needs stored credentials and there are none."""
    def __init__(self):
        super().__init__("No user is logged in.")

class NetworkUnavailableError(DomainError):
    """Raised when the device has no usable network connection."""
    def __init__(self):
        super().__init__("Network is not available.")

class NoActiveSessionError(DomainError):
    """Raised when credentials exist but no session token has been acquired yet."""
    def __init__(self):
        super().__init__("No active session; a session must be acquired first.")

# --- Validation Errors ---

class InvalidInputError(DomainError):
    """Raised when a user-supplied term is empty or blank."""
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Input '{field}' is empty.")

class SameLanguagePairError(DomainError):
    """Raised when source and target language are identical."""
    def __init__(self, lang_code: str):
        self.lang_code = lang_code
        super().__init__(f"Cannot translate from '{lang_code}' into itself.")

class InvariantViolationError(DomainError):
    """Raised when an account mutation would break the account invariants."""
    def __init__(self, reason: str):
        super().__init__(f"Account invariant violated: {reason}")

# --- Remote Errors ---

class ServerRejectedError(DomainError):
    """Raised when the server answers, but not with the expected acceptance token."""
    def __init__(self, operation: str, body: str, expected: str = "OK"):
        self.operation = operation
        self.body = body
        self.expected = expected
        super().__init__(f"Server rejected '{operation}': expected '{expected}', got '{body[:80]}'.")

class TransportFailureError(DomainError):
    """Raised when the HTTP exchange itself failed (connection error or error status)."""
    def __init__(self, operation: str, detail: str, status_code: Optional[int] = None):
        self.operation = operation
        self.detail = detail
        self.status_code = status_code
        suffix = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Request '{operation}' failed{suffix}: {detail}")

    @property
    def is_connection_error(self) -> bool:
        """True when no HTTP response was received at all."""
        return self.status_code is None

class PayloadMalformedError(DomainError):
    """Raised when a response body cannot be parsed into the expected shape."""
    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Malformed payload for '{operation}': {reason}")
