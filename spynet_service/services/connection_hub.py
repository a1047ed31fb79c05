import logging
import threading
from typing import Any, Protocol

from ..models.messages import ActionMessage, DataMessage

logger = logging.getLogger(__name__)


class Channel(Protocol):
    """Outbound side of a client connection.

    Starlette's ``WebSocket`` satisfies this protocol.
    """

    async def send_text(self, data: str) -> None: ...

    async def close(self, code: int = 1000) -> None: ...


class ConnectionHub:
    """Tracks the single live channel per session and wraps outbound envelopes.

    Registration replaces rather than rejects: a second handshake for the
    same session id becomes the live channel and the previous one is handed
    back to the caller.
    """

    def __init__(self):
        self._connections: dict[str, Channel] = {}
        self._lock = threading.Lock()

    def register(self, session_id: str, channel: Channel) -> Channel | None:
        """Install ``channel`` for ``session_id`` and return the channel it replaced."""
        with self._lock:
            previous = self._connections.get(session_id)
            self._connections[session_id] = channel
        if previous is not None and previous is not channel:
            logger.info("Replaced connection for session %s", session_id)
            return previous
        return None

    def unregister(self, session_id: str, channel: Channel | None = None) -> bool:
        """Remove the entry for ``session_id``.

        With ``channel`` given, the entry is only removed while that channel
        is still the registered one.
        """
        with self._lock:
            current = self._connections.get(session_id)
            if current is None:
                return False
            if channel is not None and current is not channel:
                return False
            del self._connections[session_id]
        return True

    def get(self, session_id: str) -> Channel | None:
        with self._lock:
            return self._connections.get(session_id)

    def is_connected(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._connections

    def session_ids(self) -> list[str]:
        with self._lock:
            return list(self._connections)

    async def send_action(self, session_id: str, action: str, params: Any = None) -> bool:
        """Send an ``action`` envelope. Returns False when no connection exists."""
        message = ActionMessage(action=action, params=params)
        return await self._send(session_id, message.model_dump_json())

    async def send_data(self, session_id: str, data: Any) -> bool:
        """Send a ``data`` envelope. Returns False when no connection exists."""
        message = DataMessage(data=data)
        return await self._send(session_id, message.model_dump_json())

    async def disconnect(self, session_id: str, code: int = 1000) -> bool:
        """Unregister and close the live channel for ``session_id``, if any."""
        with self._lock:
            channel = self._connections.pop(session_id, None)
        if channel is None:
            return False
        try:
            await channel.close(code=code)
        except Exception as e:
            # The peer may already be gone; the entry is removed regardless
            logger.warning("Closing connection for session %s failed: %s", session_id, e)
        logger.info("Disconnected session %s", session_id)
        return True

    async def _send(self, session_id: str, payload: str) -> bool:
        channel = self.get(session_id)
        if channel is None:
            logger.debug("No active connection for session %s", session_id)
            return False
        await channel.send_text(payload)
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)
