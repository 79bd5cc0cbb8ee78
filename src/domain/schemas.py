"""
Data schemas for the workbench.

규칙:
- 필드명: Python은 snake_case, JSON 직렬화(to_dict)는 camelCase
- 모든 객체는 요청 단위로 생성됨 (영속화 없음)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# =============================================================================
# Enums
# =============================================================================

class SpecType(str, Enum):
    """명세 유형."""
    ANALYSIS = "ANALYSIS"
    FIXES = "FIXES"
    PLANS = "PLANS"
    REVIEWS = "REVIEWS"


class TicketStatus(str, Enum):
    """티켓 진행 상태."""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

# =============================================================================
# Mock Domain Objects
# =============================================================================

@dataclass
class Ticket:
    """작업 티켓."""
    id: str
    title: str
    description: str | None = None
    status: TicketStatus = TicketStatus.TODO
    spec_type: SpecType | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "specType": self.spec_type.value if self.spec_type else None,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass
class Specification:
    """
    프로젝트 명세.

    tickets는 생성 순서를 유지한다.
    """
    id: str
    type: SpecType
    content: str
    project_id: str
    tickets: list[Ticket] = field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "id": self.id,
            "type": self.type.value,
            "content": self.content,
            "tickets": [t.to_dict() for t in self.tickets],
            "projectId": self.project_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass
class Project:
    """프로젝트."""
    id: str
    name: str
    description: str | None = None

# =============================================================================
# Gateway Schemas
# =============================================================================

@dataclass
class GitOperationRequest:
    """
    /api/git 요청 바디.

    operation 존재 여부 외에는 검증하지 않는다.
    """
    operation: str
    repository_id: str | None = None
    project_id: str | None = None
    repo_url: str | None = None
    access_token: str | None = None
    branch: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GitOperationRequest":
        """요청 JSON → GitOperationRequest."""
        return cls(
            operation=data.get("operation") or "",
            repository_id=data.get("repositoryId"),
            project_id=data.get("projectId"),
            repo_url=data.get("repoUrl"),
            access_token=data.get("accessToken"),
            branch=data.get("branch"),
        )


@dataclass
class GatewayResponse:
    """gateway 처리 결과 (status + JSON payload)."""
    status_code: int
    payload: Any = None


@dataclass
class StoredObject:
    """오브젝트 스토리지 목록 항목."""
    path: str
    size: int | None = None
    last_modified: str | None = None
    etag: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "size": self.size,
            "lastModified": self.last_modified,
            "etag": self.etag,
        }
