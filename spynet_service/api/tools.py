from typing import Any, Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from ..services.tool_service import tool_definitions
from .dependencies import get_tool_service

router = APIRouter(prefix="/_mock/tools")


@router.get("")
async def list_tools():
    tools = tool_definitions()
    return {"tools": tools, "count": len(tools)}


@router.post("/{name}")
async def call_tool(request: Request, name: str, args: Optional[dict[str, Any]] = Body(default=None)):
    svc = get_tool_service(request)
    if not svc.has_tool(name):
        return JSONResponse(status_code=404, content={"success": False, "error": f"Unknown tool: {name}"})
    return await svc.call(name, args)
