"""
Domain Constants: 서비스 전역 상수.

operation 이름, 응답 메시지, CORS 헤더, 스토리지 경로 정책 등.
"""

# =============================================================================
# Git Operations
# =============================================================================

GIT_OP_CONNECT = "connect"
GIT_OP_SYNC = "sync"
GIT_OP_DISCONNECT = "disconnect"
GIT_OP_CHANGE_BRANCH = "changeBranch"
GIT_OP_GET_BY_PROJECT = "getByProject"
GIT_OP_GET_BRANCHES = "getBranches"

# =============================================================================
# Code Analyzer Operations
# =============================================================================

ANALYZER_OP_ANALYZE = "analyze"
ANALYZER_OP_GET_CONTEXT = "getContext"

# =============================================================================
# Mock Values
# =============================================================================

DEFAULT_BRANCH = "main"
MOCK_COMMIT_HASH = "abc123"
MOCK_REPOSITORY_ID = "mock-repo-123"
MOCK_REPO_URL = "https://github.com/mock/repo"
MOCK_BRANCHES = ["main", "develop", "feature/test", "hotfix/bug"]

# =============================================================================
# Error Messages (응답 바디 고정 문자열)
# =============================================================================

MSG_MISSING_OPERATION = "Missing operation parameter"
MSG_INVALID_OPERATION = "Invalid operation"
MSG_GIT_FAILED = "Failed to process git operation"
MSG_ANALYSIS_FAILED = "Failed to process analysis"
MSG_UNKNOWN_ERROR = "Unknown error"

# =============================================================================
# CORS (preflight 응답)
# =============================================================================

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# =============================================================================
# Storage
# =============================================================================
# 경로 포맷: {type}/{timestamp}_{sanitized filename}

MARKDOWN_CONTENT_TYPE = "text/markdown"
STORAGE_FILE_TYPES = ("specs", "tickets")
DEFAULT_STORAGE_CONTAINER = "specifications"
