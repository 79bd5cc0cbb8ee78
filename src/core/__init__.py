"""
Core layer: 공용 기반 모듈.

역할:
- 식별자/시계 소스 (테스트 시 주입 가능)
- 로깅 설정, 민감 정보 마스킹
"""

from .ids import IdSource, default_id_source
from .logging import configure_logging, mask_sensitive

__all__ = [
    # ids
    "IdSource",
    "default_id_source",
    # logging
    "configure_logging",
    "mask_sensitive",
]
