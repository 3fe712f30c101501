# lingosync/shared/resilience.py
import logging

import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
    before_sleep_log,
)

from lingosync.core.domain.exceptions import TransportFailureError

logger = structlog.get_logger()

def _is_connection_failure(error: BaseException) -> bool:
    # Error statuses are answers from the server; retrying them is pointless.
    return isinstance(error, TransportFailureError) and error.is_connection_error

def request_retry_policy(retries: int, wait_seconds: float = 1.0) -> AsyncRetrying:
    """
    Retry policy for a single HTTP request.

    Strategy:
    - Retry: only connection errors / timeouts (no response at all).
    - Wait: fixed delay between attempts.
    - Stop: after `retries` additional attempts (0 means a single try).
    - Log: retries via structlog.
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max(retries, 0) + 1),
        wait=wait_fixed(wait_seconds),
        retry=retry_if_exception(_is_connection_failure),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
