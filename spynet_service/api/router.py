from fastapi import APIRouter

from .health import router as health_router
from .sessions import router as sessions_router
from .endpoints import router as endpoints_router
from .sockets import router as socket_router
from .tools import router as tools_router
from .mock import router as mock_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(sessions_router, tags=["sessions"])
api_router.include_router(endpoints_router, tags=["endpoints"])
api_router.include_router(socket_router, tags=["socket"])
api_router.include_router(tools_router, tags=["tools"])
# Catch-all data plane goes last
api_router.include_router(mock_router, tags=["mock"])
