"""
test_logging.py - 로깅 설정/마스킹 테스트

DoD:
- accessToken 원문이 로그 바디에 남지 않음
- 디버그 모드에서 지정한 로거만 DEBUG
"""

import logging

from src.core.logging import MASK, configure_logging, mask_sensitive

DEBUG_LOGGERS = ("tests.logging.gateway",)

# =============================================================================
# mask_sensitive 테스트
# =============================================================================


class TestMaskSensitive:
    """mask_sensitive 함수 테스트."""

    def test_masks_access_token(self):
        """accessToken → ***."""
        body = {"operation": "connect", "accessToken": "ghp_secret"}

        masked = mask_sensitive(body)

        assert masked["accessToken"] == MASK
        assert masked["operation"] == "connect"

    def test_original_not_modified(self):
        """원본 dict 유지."""
        body = {"accessToken": "ghp_secret"}

        mask_sensitive(body)

        assert body["accessToken"] == "ghp_secret"

    def test_empty_token_becomes_none(self):
        """값 없는 토큰 → None."""
        assert mask_sensitive({"accessToken": ""})["accessToken"] is None

    def test_nested_dict(self):
        """중첩 dict도 마스킹."""
        masked = mask_sensitive({"auth": {"password": "pw"}})

        assert masked["auth"]["password"] == MASK

    def test_non_dict_passthrough(self):
        """dict 아니면 그대로."""
        assert mask_sensitive([1, 2]) == [1, 2]
        assert mask_sensitive(None) is None


# =============================================================================
# configure_logging 테스트
# =============================================================================


class TestConfigureLogging:
    """configure_logging 함수 테스트."""

    def test_debug_lowers_given_loggers(self):
        """debug=True → DEBUG."""
        configure_logging(debug=True, debug_loggers=DEBUG_LOGGERS)

        for name in DEBUG_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG

    def test_default_keeps_info(self):
        """debug=False → INFO."""
        configure_logging(debug=False, debug_loggers=DEBUG_LOGGERS)

        for name in DEBUG_LOGGERS:
            assert logging.getLogger(name).level == logging.INFO

    def test_other_loggers_untouched(self):
        """지정하지 않은 로거는 레벨 미설정."""
        configure_logging(debug=True, debug_loggers=DEBUG_LOGGERS)

        assert logging.getLogger("tests.logging.unrelated").level == logging.NOTSET
