"""
ID 생성: mock 응답/목업 콘텐츠용 타임스탬프 기반 식별자

규칙:
- 식별자는 호출마다 고유 (재현성은 보장하지 않음)
- 테스트에서는 clock 주입으로 결정론적 출력
"""

import threading
import time
from collections.abc import Callable
from datetime import UTC, datetime


class IdSource:
    """
    타임스탬프 기반 식별자 소스.

    동일 밀리초에 여러 번 호출되어도 값이 겹치지 않도록
    마지막 발급값보다 항상 큰 값을 반환한다.

    Usage:
        ids = IdSource(clock=lambda: 1_700_000_000.0)
        ids.mock_id("repo")  # "repo-mock-1700000000000"
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_timestamp(self) -> int:
        """
        epoch 밀리초 타임스탬프 발급.

        Returns:
            직전 발급값보다 큰 정수
        """
        now_ms = int(self._clock() * 1000)
        with self._lock:
            if now_ms <= self._last:
                now_ms = self._last + 1
            self._last = now_ms
        return now_ms

    def now_iso(self) -> str:
        """현재 시각 ISO-8601 (UTC)."""
        return datetime.fromtimestamp(self._clock(), UTC).isoformat()

    def mock_id(self, prefix: str) -> str:
        """
        mock 식별자 생성.

        포맷: {prefix}-mock-{timestamp}
        """
        return f"{prefix}-mock-{self.next_timestamp()}"


_default_source = IdSource()


def default_id_source() -> IdSource:
    """프로세스 공용 IdSource."""
    return _default_source
