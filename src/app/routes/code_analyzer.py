"""
Code Analyzer Routes: 코드베이스 분석/컨텍스트 조회.

- POST /api/code-analyzer → analyze, getContext
- OPTIONS /api/code-analyzer → CORS preflight
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from src.domain.constants import CORS_HEADERS

api_router = APIRouter()


@api_router.post("")
async def code_analyzer_operation(request: Request) -> JSONResponse:
    """분석 operation 요청."""
    gateway = request.app.state.code_analyzer_gateway
    result = await gateway.handle(await request.body())
    return JSONResponse(content=result.payload, status_code=result.status_code)


@api_router.options("")
async def code_analyzer_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)
