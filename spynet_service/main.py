import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import SpynetSettings
from .services.connection_hub import ConnectionHub
from .services.mock_service import MockService
from .services.session_store import SessionStore
from .services.tool_service import ToolService
from .api import api_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def init_services(app: FastAPI, settings: SpynetSettings) -> SessionStore:
    """Build the core services and attach them to ``app.state``."""
    hub = ConnectionHub()
    store = SessionStore(
        hub,
        ttl_ms=settings.session_ttl,
        sweep_interval_ms=settings.sweep_interval,
        history_limit=settings.history_limit,
    )

    app.state.settings = settings
    app.state.connection_hub = hub
    app.state.session_store = store
    app.state.mock_service = MockService(store)
    app.state.tool_service = ToolService(store, hub)
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = SpynetSettings()
    logging.getLogger().setLevel(settings.log_level_value)

    store = init_services(app, settings)
    store.start()

    logger.info("SpyNet server running on http://%s:%d", settings.host, settings.port)
    logger.info("Session TTL: %ss", settings.session_ttl_seconds)
    logger.info("Data plane: /session/{sessionId}/*  Control plane: /_mock/sessions/*  "
                "WebSocket: /session/{sessionId}/socket")

    yield

    # Shutdown
    await store.destroy()
    logger.info("Session store shut down")


app = FastAPI(
    title="SpyNet Service",
    version="0.1.0",
    description="Session-scoped HTTP/WebSocket mock server with a control plane for scripted responses",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=SpynetSettings().cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


def run():
    import uvicorn

    settings = SpynetSettings()
    uvicorn.run(
        "spynet_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
