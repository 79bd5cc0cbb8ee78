"""
Error definitions for the gateway.

규칙:
- 클라이언트 입력 오류 → GatewayRejectError (400)
- 그 외 처리 중 예외 → 500 (gateway에서 일괄 변환)
"""


class GatewayRejectError(Exception):
    """
    클라이언트 입력이 잘못되어 요청을 거절할 때 발생하는 에러.

    - operation 누락
    - mock 모드에서 알 수 없는 operation

    Usage:
        raise GatewayRejectError(ErrorCodes.INVALID_OPERATION, "Unknown operation: 'bogus'")
    """

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or code)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Client input (400) ===
    MISSING_OPERATION = "MISSING_OPERATION"
    INVALID_OPERATION = "INVALID_OPERATION"
