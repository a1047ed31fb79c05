import asyncio
import logging
import threading
from collections import deque
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ..models.sessions import RequestRecord, SessionMetadata
from .connection_hub import ConnectionHub
from .endpoint_registry import EndpointRegistry

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 1000
MAX_REQUEST_QUERY = 1000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Session:
    """One isolated mock namespace: endpoints, request history and timestamps."""

    def __init__(self, session_id: str, now: datetime, history_limit: int = DEFAULT_HISTORY_LIMIT):
        self._id = session_id
        self.created_at = now
        self.last_activity_at = now
        self.endpoints = EndpointRegistry()
        self._history: deque[RequestRecord] = deque(maxlen=history_limit)
        self._lock = threading.Lock()

    @property
    def id(self) -> str:
        return self._id

    @property
    def history_limit(self) -> int:
        return self._history.maxlen

    def record_request(self, method: str, path: str, status: int, configured: bool,
                       response_time_ms: float, timestamp: datetime | None = None) -> RequestRecord:
        """Append a request record, evicting the oldest once the limit is reached."""
        record = RequestRecord(
            method=method,
            path=path,
            status=status,
            timestamp=timestamp or _utcnow(),
            configured=configured,
            response_time_ms=response_time_ms,
        )
        with self._lock:
            self._history.append(record)
        return record

    def recent_requests(self, limit: int = 100) -> list[RequestRecord]:
        """Return up to ``limit`` of the newest records, oldest first."""
        limit = max(0, min(limit, MAX_REQUEST_QUERY, self.history_limit))
        with self._lock:
            if limit == 0:
                return []
            return list(self._history)[-limit:]


class SessionStore:
    """Owns every live session and expires idle ones on a periodic sweep.

    The store consults the ``ConnectionHub`` for connection state; the hub is
    the source of truth for whether a session has a live socket.
    """

    def __init__(self, hub: ConnectionHub, ttl_ms: int = 3600000, sweep_interval_ms: int = 60000,
                 history_limit: int = DEFAULT_HISTORY_LIMIT,
                 clock: Optional[Callable[[], datetime]] = None):
        self.hub = hub
        self.ttl_ms = ttl_ms
        self.sweep_interval_ms = sweep_interval_ms
        self.history_limit = history_limit
        self._clock = clock or _utcnow
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()
        self._sweep_task: asyncio.Task | None = None

    def get_or_create(self, session_id: str) -> Session:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = Session(session_id, self._clock(), self.history_limit)
                self._sessions[session_id] = session
                logger.info("Created session %s", session_id)
            return session

    def get(self, session_id: str) -> Session | None:
        with self._lock:
            return self._sessions.get(session_id)

    def touch(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                session.last_activity_at = self._clock()

    async def delete(self, session_id: str) -> bool:
        """Remove a session and close its live connection. False if it did not exist."""
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        await self.hub.disconnect(session_id)
        logger.info("Deleted session %s", session_id)
        return True

    def _pop_if_expired(self, session_id: str, now: datetime, ttl: timedelta) -> bool:
        # Re-checked at pop time: activity may have landed while an earlier close was awaited
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None or now - session.last_activity_at <= ttl:
                return False
            del self._sessions[session_id]
        return True

    async def sweep_expired(self, now: datetime | None = None, ttl_ms: int | None = None) -> list[str]:
        """Delete every session idle for longer than ``ttl_ms``; return the removed ids."""
        now = now or self._clock()
        ttl = timedelta(milliseconds=self.ttl_ms if ttl_ms is None else ttl_ms)
        with self._lock:
            candidates = [
                sid for sid, s in self._sessions.items()
                if now - s.last_activity_at > ttl
            ]
        removed = []
        for sid in candidates:
            if self._pop_if_expired(sid, now, ttl):
                removed.append(sid)
                await self.hub.disconnect(sid)
        if removed:
            logger.info("Swept %d expired session(s): %s", len(removed), ", ".join(removed))
        return removed

    def start(self) -> None:
        """Start the periodic expiry sweep on the running event loop."""
        if self._sweep_task is None or self._sweep_task.done():
            self._sweep_task = asyncio.create_task(self._sweep_loop())
            logger.info("Session sweep started (ttl=%dms, interval=%dms)",
                        self.ttl_ms, self.sweep_interval_ms)

    async def _sweep_loop(self) -> None:
        interval = self.sweep_interval_ms / 1000
        while True:
            await asyncio.sleep(interval)
            try:
                await self.sweep_expired()
            except Exception:
                logger.exception("Session sweep failed")

    async def destroy(self) -> None:
        """Cancel the sweep and tear down every session."""
        if self._sweep_task is not None:
            self._sweep_task.cancel()
            try:
                await self._sweep_task
            except asyncio.CancelledError:
                pass
            self._sweep_task = None
        with self._lock:
            session_ids = list(self._sessions)
        for sid in session_ids:
            await self.delete(sid)
        logger.info("Session store destroyed (%d session(s) closed)", len(session_ids))

    def list(self) -> list[SessionMetadata]:
        with self._lock:
            sessions = list(self._sessions.values())
        return [
            SessionMetadata(
                id=s.id,
                created_at=s.created_at,
                last_activity_at=s.last_activity_at,
                connected=self.hub.is_connected(s.id),
            )
            for s in sessions
        ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions
