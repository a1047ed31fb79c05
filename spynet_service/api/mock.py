from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ..services.mock_service import MockResult
from .dependencies import get_mock_service

router = APIRouter()

MOCK_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _to_response(result: MockResult) -> Response:
    """Render a resolved mock result as an HTTP response."""
    status = result.status
    headers = result.headers
    if status < 200 or status in (204, 304):
        return Response(status_code=status, headers=headers)
    if isinstance(result.body, str):
        if any(k.lower() == "content-type" for k in headers):
            return Response(content=result.body, status_code=status, headers=headers)
        return PlainTextResponse(content=result.body, status_code=status, headers=headers)
    return JSONResponse(content=result.body, status_code=status, headers=headers)


@router.api_route("/session/{session_id}/{path:path}", methods=MOCK_METHODS)
async def mock_request(request: Request, session_id: str, path: str):
    svc = get_mock_service(request)
    result = svc.handle_request(session_id, request.method, "/" + path)
    return _to_response(result)
