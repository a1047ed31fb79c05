import logging
import time
from dataclasses import dataclass, field
from typing import Any

from .session_store import SessionStore

logger = logging.getLogger(__name__)

NOT_CONFIGURED_STATUS = 404


@dataclass
class MockResult:
    status: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    configured: bool = False


class MockService:
    """Serves data-plane requests from a session's configured endpoints."""

    def __init__(self, store: SessionStore):
        self.store = store

    def handle_request(self, session_id: str, method: str, path: str) -> MockResult:
        """Resolve one data-plane request and record it in the session history.

        Unknown sessions are created on first use. Requests without a
        configured endpoint get a 404 and are recorded as unconfigured.
        """
        start = time.perf_counter()
        method = method.upper()

        session = self.store.get_or_create(session_id)
        self.store.touch(session_id)

        response = session.endpoints.next_response(method, path)
        if response is None:
            result = MockResult(
                status=NOT_CONFIGURED_STATUS,
                body={"error": "Endpoint not configured", "method": method, "path": path},
            )
        else:
            result = MockResult(
                status=response.status,
                body=response.body,
                headers=dict(response.headers or {}),
                configured=True,
            )

        elapsed_ms = (time.perf_counter() - start) * 1000
        session.record_request(
            method=method,
            path=path,
            status=result.status,
            configured=result.configured,
            response_time_ms=elapsed_ms,
        )
        logger.debug("%s %s [%s] -> %d (configured=%s)",
                     method, path, session_id, result.status, result.configured)
        return result
