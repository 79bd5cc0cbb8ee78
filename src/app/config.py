"""
설정 로드: default.yaml + 환경변수 (.env 포함).

우선순위:
1. 환경변수 (GIT_INTEGRATION_URL 등)
2. default.yaml
3. 코드 기본값

upstream URL이 비어 있으면 mock 모드 (에러 아님).
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.domain.constants import DEFAULT_STORAGE_CONTAINER

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


@dataclass
class GatewayConfig:
    """forward/mock 모드 선택 설정."""
    git_integration_url: str = ""
    code_analyzer_url: str = ""
    debug: bool = False


@dataclass
class StorageConfig:
    """오브젝트 스토리지 접속 설정."""
    connection_string: str = ""
    container: str = DEFAULT_STORAGE_CONTAINER


@dataclass
class AppConfig:
    """애플리케이션 설정 (시작 시 1회 로드 후 주입)."""
    gateway: GatewayConfig = field(default_factory=GatewayConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def _load_yaml(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def load_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    load_env_file: bool = True,
) -> AppConfig:
    """
    설정 로드.

    Args:
        config_path: YAML 설정 경로 (None이면 프로젝트 루트 default.yaml)
        environ: 환경변수 매핑 (None이면 os.environ)
        load_env_file: True면 .env 파일을 먼저 로드

    Returns:
        AppConfig
    """
    if load_env_file:
        load_dotenv()
    if environ is None:
        environ = os.environ

    data = _load_yaml(config_path or DEFAULT_CONFIG_PATH)
    gateway_data = data.get("gateway") or {}
    storage_data = data.get("storage") or {}

    gateway = GatewayConfig(
        git_integration_url=environ.get(
            "GIT_INTEGRATION_URL", gateway_data.get("git_integration_url") or ""
        ),
        code_analyzer_url=environ.get(
            "CODE_ANALYZER_URL", gateway_data.get("code_analyzer_url") or ""
        ),
        debug=_as_bool(
            environ.get("DEBUG_GIT_INTEGRATION", gateway_data.get("debug", False))
        ),
    )

    storage = StorageConfig(
        connection_string=environ.get(
            "AZURE_STORAGE_CONNECTION_STRING",
            storage_data.get("connection_string") or "",
        ),
        container=environ.get(
            "AZURE_STORAGE_CONTAINER",
            storage_data.get("container") or DEFAULT_STORAGE_CONTAINER,
        ),
    )

    return AppConfig(gateway=gateway, storage=storage)
