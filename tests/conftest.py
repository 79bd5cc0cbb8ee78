"""
Pytest fixtures for the workbench tests.

테스트 구성:
- mock 모드 / forward 모드 설정 분리
- 고정 시계 IdSource로 식별자 결정론적 검증
"""

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from src.app.config import AppConfig, GatewayConfig
from src.core.ids import IdSource

FIXED_EPOCH = 1_700_000_000.0
FIXED_EPOCH_MS = 1_700_000_000_000

UPSTREAM_URL = "https://upstream.example.test/git"

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


# =============================================================================
# ID Fixtures
# =============================================================================

@pytest.fixture
def fixed_ids() -> IdSource:
    """고정 시계 IdSource (첫 타임스탬프 = FIXED_EPOCH_MS)."""
    return IdSource(clock=lambda: FIXED_EPOCH)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def mock_config() -> AppConfig:
    """upstream 미설정 (mock 모드)."""
    return AppConfig(gateway=GatewayConfig())


@pytest.fixture
def forward_config() -> AppConfig:
    """upstream 설정 (forward 모드)."""
    return AppConfig(
        gateway=GatewayConfig(
            git_integration_url=UPSTREAM_URL,
            code_analyzer_url=UPSTREAM_URL,
        )
    )


# =============================================================================
# Upstream Stub Fixtures
# =============================================================================

@pytest.fixture
def upstream_calls() -> list[httpx.Request]:
    """stub upstream이 받은 요청 기록."""
    return []


@pytest.fixture
def make_upstream(
    upstream_calls: list[httpx.Request],
) -> Callable[..., httpx.MockTransport]:
    """
    고정 응답을 돌려주는 stub upstream transport 팩토리.

    Usage:
        transport = make_upstream(201, {"ok": True})
    """

    def factory(status_code: int = 200, payload: object = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            upstream_calls.append(request)
            return httpx.Response(status_code, json=payload)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def upstream_url() -> str:
    """stub upstream URL."""
    return UPSTREAM_URL


@pytest.fixture
def fixed_epoch_ms() -> int:
    """fixed_ids의 첫 타임스탬프."""
    return FIXED_EPOCH_MS
