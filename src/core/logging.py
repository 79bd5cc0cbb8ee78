"""
Logging: 로거 설정, 요청 바디 마스킹

규칙:
- accessToken 등 비밀 값은 로그에 원문으로 남기지 않음
- 디버그 로그는 DEBUG_GIT_INTEGRATION 설정 시에만 출력
"""

import logging
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# 마스킹 대상 키 (요청 바디)
SENSITIVE_KEYS = ("accessToken", "access_token", "token", "password")

MASK = "***"


def configure_logging(
    debug: bool = False,
    level: int = logging.INFO,
    debug_loggers: tuple[str, ...] = (),
) -> None:
    """
    루트 로거 설정.

    Args:
        debug: True면 debug_loggers를 DEBUG로 설정
        level: 루트 로그 레벨
        debug_loggers: 디버그 모드 대상 로거 이름
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)

    debug_level = logging.DEBUG if debug else level
    for name in debug_loggers:
        logging.getLogger(name).setLevel(debug_level)


def mask_sensitive(body: Any) -> Any:
    """
    로그 출력용 바디 사본 생성.

    - dict가 아니면 그대로 반환
    - 비밀 키는 값이 있으면 "***", 없으면 None

    Args:
        body: 요청 바디 (파싱된 JSON)

    Returns:
        마스킹된 사본
    """
    if not isinstance(body, dict):
        return body

    masked: dict[str, Any] = {}
    for key, value in body.items():
        if key in SENSITIVE_KEYS:
            masked[key] = MASK if value else None
        elif isinstance(value, dict):
            masked[key] = mask_sensitive(value)
        else:
            masked[key] = value
    return masked
