import logging
import threading

from ..models.endpoints import EndpointConfig, ResponseSpec

logger = logging.getLogger(__name__)


def make_key(method: str, path: str) -> str:
    """Build the registry key: uppercased method, literal path."""
    return f"{method.upper()}:{path}"


class EndpointRegistry:
    """Per-session mapping of (method, path) to a response sequence.

    Each entry carries a call counter. ``next_response`` serves
    ``responses[min(count, n - 1)]`` and then advances the counter, so the
    sequence plays out once and then sticks on its last element.
    """

    def __init__(self):
        self._endpoints: dict[str, EndpointConfig] = {}
        self._lock = threading.Lock()

    def configure(self, method: str, path: str, responses: list[ResponseSpec]) -> EndpointConfig:
        """Install a response sequence, replacing any existing one and resetting its counter."""
        config = EndpointConfig(
            method=method.upper(),
            path=path,
            responses=list(responses),
            call_count=0,
        )
        key = make_key(method, path)
        with self._lock:
            # Re-insert so listing order follows the latest configuration
            self._endpoints.pop(key, None)
            self._endpoints[key] = config
        logger.debug("Configured %s with %d response(s)", key, len(config.responses))
        return config.model_copy()

    def next_response(self, method: str, path: str) -> ResponseSpec | None:
        key = make_key(method, path)
        with self._lock:
            config = self._endpoints.get(key)
            if config is None or not config.responses:
                return None
            index = min(config.call_count, len(config.responses) - 1)
            config.call_count += 1
            return config.responses[index]

    def get(self, method: str, path: str) -> EndpointConfig | None:
        """Read-only lookup; does not advance the counter."""
        with self._lock:
            config = self._endpoints.get(make_key(method, path))
            return config.model_copy() if config is not None else None

    def list(self) -> list[EndpointConfig]:
        with self._lock:
            return [config.model_copy() for config in self._endpoints.values()]

    def clear(self, method: str, path: str) -> bool:
        with self._lock:
            return self._endpoints.pop(make_key(method, path), None) is not None

    def clear_all(self) -> None:
        with self._lock:
            self._endpoints.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._endpoints)
