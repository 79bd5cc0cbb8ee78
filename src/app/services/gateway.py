"""
Operation Gateway: upstream 함수로 전달하거나 mock 응답.

동작:
- operation 누락 → 400 "Missing operation parameter"
- upstream_url 설정됨 → 바디 전체를 JSON POST, status/body 그대로 중계
- upstream_url 없음 → mock responder (알 수 없는 operation → 400)
- 그 외 예외 → 500 {error, details}

재시도 없음. timeout은 httpx 기본값.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

import httpx

from src.core.ids import IdSource, default_id_source
from src.core.logging import mask_sensitive
from src.domain.constants import (
    MSG_INVALID_OPERATION,
    MSG_MISSING_OPERATION,
    MSG_UNKNOWN_ERROR,
)
from src.domain.errors import ErrorCodes, GatewayRejectError
from src.domain.schemas import GatewayResponse

logger = logging.getLogger(__name__)

MockResponder = Callable[[str, dict[str, Any], IdSource], dict[str, Any]]

REJECT_MESSAGES = {
    ErrorCodes.MISSING_OPERATION: MSG_MISSING_OPERATION,
    ErrorCodes.INVALID_OPERATION: MSG_INVALID_OPERATION,
}


def _reject_constant(name: str) -> Any:
    """NaN, Infinity 등 JSON 표준 외 상수 거부."""
    raise ValueError(f"Out of range float value in upstream response: {name}")


class OperationGateway:
    """
    operation 기반 forward-or-mock gateway.

    Args:
        name: 로그 식별용 이름 (예: "git")
        upstream_url: upstream 함수 URL (빈 문자열이면 mock 모드)
        mock_responder: mock 모드에서 사용할 응답 함수
        error_message: 500 응답의 error 문자열
        ids: mock 식별자 소스
        transport: httpx transport (테스트에서 stub upstream 주입)
    """

    def __init__(
        self,
        name: str,
        upstream_url: str,
        mock_responder: MockResponder,
        error_message: str,
        ids: IdSource | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = name
        self.upstream_url = upstream_url or ""
        self.mock_responder = mock_responder
        self.error_message = error_message
        self.ids = ids or default_id_source()
        self._transport = transport

    @property
    def mock_mode(self) -> bool:
        return not self.upstream_url

    async def handle(self, raw_body: bytes) -> GatewayResponse:
        """
        요청 바디 처리.

        Args:
            raw_body: HTTP 요청 바디 (JSON bytes)

        Returns:
            GatewayResponse (status_code, payload)
        """
        logger.debug(f"[{self.name}] request received")

        try:
            body = json.loads(raw_body)
            logger.debug(f"[{self.name}] request body: {mask_sensitive(body)}")

            operation = body.get("operation") if isinstance(body, dict) else None
            if not operation:
                raise GatewayRejectError(ErrorCodes.MISSING_OPERATION)

            if self.mock_mode:
                logger.debug(f"[{self.name}] no upstream configured, using mock response")
                payload = self.mock_responder(operation, body, self.ids)
                return GatewayResponse(status_code=200, payload=payload)

            return await self._forward(body)

        except GatewayRejectError as e:
            logger.debug(f"[{self.name}] rejected: {e}")
            return GatewayResponse(
                status_code=400,
                payload={"error": REJECT_MESSAGES[e.code]},
            )

        except Exception as e:
            logger.error(f"[{self.name}] failed to process operation: {e}", exc_info=True)
            return GatewayResponse(
                status_code=500,
                payload={
                    "error": self.error_message,
                    "details": str(e) or MSG_UNKNOWN_ERROR,
                },
            )

    async def _forward(self, body: Any) -> GatewayResponse:
        """upstream으로 바디 전체 전달, status/body 그대로 반환."""
        logger.debug(f"[{self.name}] forwarding to upstream: {self.upstream_url}")

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(self.upstream_url, json=body)

        logger.debug(f"[{self.name}] upstream response status: {response.status_code}")
        data = json.loads(response.content, parse_constant=_reject_constant)
        logger.debug(f"[{self.name}] upstream response data: {data}")

        return GatewayResponse(status_code=response.status_code, payload=data)
