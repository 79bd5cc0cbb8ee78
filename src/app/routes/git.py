"""
Git Routes: 저장소 연결/동기화/해제.

- POST /api/git → operation 처리 (upstream 전달 또는 mock)
- OPTIONS /api/git → CORS preflight
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from src.app.services.gateway import OperationGateway
from src.domain.constants import CORS_HEADERS

api_router = APIRouter()


def get_git_gateway(request: Request) -> OperationGateway:
    """Request에서 git gateway 가져오기."""
    return request.app.state.git_gateway


@api_router.post("")
async def git_operation(request: Request) -> JSONResponse:
    """
    Git operation 요청.

    Body:
        {operation, repositoryId?, projectId?, repoUrl?, accessToken?, branch?}
    """
    gateway = get_git_gateway(request)
    result = await gateway.handle(await request.body())
    return JSONResponse(content=result.payload, status_code=result.status_code)


@api_router.options("")
async def git_preflight() -> Response:
    """CORS preflight."""
    return Response(status_code=200, headers=CORS_HEADERS)
