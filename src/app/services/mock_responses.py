"""
Mock Responders: upstream 미설정 시 operation별 고정 응답.

각 responder 시그니처:
    (operation, body, ids) -> dict

알 수 없는 operation은 GatewayRejectError(INVALID_OPERATION).
"""

from typing import Any

from src.core.ids import IdSource
from src.domain.constants import (
    ANALYZER_OP_ANALYZE,
    ANALYZER_OP_GET_CONTEXT,
    DEFAULT_BRANCH,
    GIT_OP_CHANGE_BRANCH,
    GIT_OP_CONNECT,
    GIT_OP_DISCONNECT,
    GIT_OP_GET_BRANCHES,
    GIT_OP_GET_BY_PROJECT,
    GIT_OP_SYNC,
    MOCK_BRANCHES,
    MOCK_COMMIT_HASH,
    MOCK_REPO_URL,
    MOCK_REPOSITORY_ID,
)
from src.domain.errors import ErrorCodes, GatewayRejectError
from src.domain.schemas import GitOperationRequest

# =============================================================================
# Git
# =============================================================================


def git_mock_response(operation: str, body: dict[str, Any], ids: IdSource) -> dict[str, Any]:
    """
    Git operation mock 응답.

    Args:
        operation: connect, sync, disconnect, changeBranch, getByProject, getBranches
        body: 요청 바디 전체
        ids: 식별자 소스

    Returns:
        operation별 응답 payload

    Raises:
        GatewayRejectError: 알 수 없는 operation
    """
    request = GitOperationRequest.from_dict(body)

    if operation == GIT_OP_CONNECT:
        return {
            "repositoryId": ids.mock_id("repo"),
            "message": "Repository connected successfully (mock)",
            "branch": request.branch or DEFAULT_BRANCH,
        }

    if operation == GIT_OP_SYNC:
        return {
            "message": "Repository synced successfully (mock)",
            "snapshotId": ids.mock_id("snapshot"),
            "commitHash": MOCK_COMMIT_HASH,
        }

    if operation == GIT_OP_DISCONNECT:
        return {"message": "Repository disconnected successfully (mock)"}

    if operation == GIT_OP_CHANGE_BRANCH:
        return {
            "message": "Branch changed successfully (mock)",
            "branch": request.branch,
        }

    if operation == GIT_OP_GET_BY_PROJECT:
        return {
            "repository": {
                "id": MOCK_REPOSITORY_ID,
                "projectId": request.project_id,
                "repoUrl": MOCK_REPO_URL,
                "branch": DEFAULT_BRANCH,
                "syncStatus": "synced",
                "lastSyncedAt": ids.now_iso(),
                "lastCommitHash": MOCK_COMMIT_HASH,
            },
        }

    if operation == GIT_OP_GET_BRANCHES:
        return {
            "branches": list(MOCK_BRANCHES),
            "currentBranch": DEFAULT_BRANCH,
        }

    raise GatewayRejectError(ErrorCodes.INVALID_OPERATION, f"Unknown operation: {operation!r}")


# =============================================================================
# Code Analyzer
# =============================================================================

_TECH_STACK = {
    "languages": ["TypeScript", "JavaScript"],
    "frameworks": ["Next.js", "React"],
    "buildTools": ["npm", "Webpack"],
    "packageManagers": ["npm"],
}

_INTEGRATION_POINTS = [
    {"file": "package.json", "purpose": "Node.js dependencies and scripts"},
    {"file": "next.config.ts", "purpose": "Next.js configuration"},
    {"file": "app/api", "purpose": "API routes"},
    {"file": "components", "purpose": "React components"},
    {"file": "lib", "purpose": "Utility libraries"},
]


def code_analyzer_mock_response(
    operation: str, body: dict[str, Any], ids: IdSource
) -> dict[str, Any]:
    """
    Code analyzer mock 응답.

    Raises:
        GatewayRejectError: analyze/getContext 외 operation
    """
    if operation == ANALYZER_OP_ANALYZE:
        return {
            "message": "Analysis complete (mock)",
            "metrics": {
                "totalFiles": 150,
                "languageBreakdown": {
                    ".ts": 80,
                    ".tsx": 40,
                    ".json": 15,
                    ".md": 10,
                    ".css": 5,
                },
            },
            "techStack": dict(_TECH_STACK),
            "patterns": {
                "architecturePattern": "Component-based",
                "testingStrategy": "Unit Testing",
            },
        }

    if operation == ANALYZER_OP_GET_CONTEXT:
        return {
            "context": {
                "techStack": dict(_TECH_STACK),
                "patterns": {
                    "architecturePattern": "Component-based",
                    "testingStrategy": "Unit Testing",
                    "namingConventions": [
                        "camelCase for variables",
                        "PascalCase for components",
                    ],
                },
                "integrationPoints": [dict(p) for p in _INTEGRATION_POINTS],
                "relevantFiles": [
                    "README.md",
                    "package.json",
                    "tsconfig.json",
                    "next.config.ts",
                ],
                "metrics": {
                    "totalFiles": 150,
                    "languageBreakdown": {".ts": 80, ".tsx": 40, ".json": 15},
                },
            },
            "lastAnalyzedAt": ids.now_iso(),
        }

    raise GatewayRejectError(ErrorCodes.INVALID_OPERATION, f"Unknown operation: {operation!r}")
