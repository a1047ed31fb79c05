from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/api/health")
async def health(request: Request):
    settings = request.app.state.settings
    store = getattr(request.app.state, "session_store", None)
    hub = getattr(request.app.state, "connection_hub", None)

    return {
        "status": "ok",
        "version": request.app.version,
        "sessions": len(store) if store is not None else 0,
        "connections": len(hub) if hub is not None else 0,
        "session_ttl_ms": settings.session_ttl,
        "sweep_interval_ms": settings.sweep_interval,
    }
