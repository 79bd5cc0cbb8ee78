"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app

모드 선택 (forward / mock)은 시작 시 로드한 설정으로 결정.
테스트는 create_app(config=...)로 명시적으로 주입.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from src.app.config import AppConfig, load_config
from src.app.routes import code_analyzer, git
from src.app.services.gateway import OperationGateway
from src.app.services.mock_responses import code_analyzer_mock_response, git_mock_response
from src.app.services.storage import MarkdownStorage
from src.core.ids import IdSource
from src.core.logging import configure_logging
from src.domain.constants import MSG_ANALYSIS_FAILED, MSG_GIT_FAILED

logger = logging.getLogger(__name__)

# =============================================================================
# App Factory
# =============================================================================


def create_app(
    config: AppConfig | None = None,
    ids: IdSource | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        config: 앱 설정 (None이면 시작 시 default.yaml + 환경변수 로드)
        ids: mock 식별자 소스
        transport: upstream 호출용 httpx transport (테스트 stub)

    Returns:
        FastAPI 인스턴스
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        애플리케이션 생명주기 관리.

        시작 시: 설정 로드, gateway 구성, 스토리지 연결 (connection string 있을 때만)
        """
        # Startup
        app_config = config or load_config()
        configure_logging(
            debug=app_config.gateway.debug,
            debug_loggers=(OperationGateway.__module__,),
        )

        app.state.config = app_config
        app.state.git_gateway = OperationGateway(
            name="git",
            upstream_url=app_config.gateway.git_integration_url,
            mock_responder=git_mock_response,
            error_message=MSG_GIT_FAILED,
            ids=ids,
            transport=transport,
        )
        app.state.code_analyzer_gateway = OperationGateway(
            name="code-analyzer",
            upstream_url=app_config.gateway.code_analyzer_url,
            mock_responder=code_analyzer_mock_response,
            error_message=MSG_ANALYSIS_FAILED,
            ids=ids,
            transport=transport,
        )

        storage_config = app_config.storage
        if storage_config.connection_string:
            app.state.storage = MarkdownStorage.from_connection_string(
                storage_config.connection_string,
                storage_config.container,
                logger,
            )
            logger.info(f"Markdown storage container: {storage_config.container}")
        else:
            app.state.storage = None

        yield

    app = FastAPI(
        title="Spec Workbench API",
        description="명세/티켓 작업 공간용 Git 연동 및 분석 API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # API 라우트
    app.include_router(git.api_router, prefix="/api/git", tags=["Git API"])
    app.include_router(
        code_analyzer.api_router, prefix="/api/code-analyzer", tags=["Code Analyzer API"]
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """서비스 정보."""
        return {
            "message": "Spec Workbench API",
            "endpoints": {
                "git": "/api/git",
                "code_analyzer": "/api/code-analyzer",
            },
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
