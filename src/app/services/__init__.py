"""
Application Services.

역할:
- gateway: upstream 전달 또는 mock 응답
- mock_responses: operation별 mock payload
- mock_content: 명세/티켓/프롬프트 placeholder 생성
- storage: Markdown 파일 오브젝트 스토리지 접근
"""

from .gateway import OperationGateway
from .mock_content import (
    analyze_project,
    generate_prompt,
    generate_specification,
    generate_tickets,
)
from .mock_responses import code_analyzer_mock_response, git_mock_response
from .storage import MarkdownStorage, generate_file_path

__all__ = [
    "OperationGateway",
    "git_mock_response",
    "code_analyzer_mock_response",
    "generate_specification",
    "generate_tickets",
    "analyze_project",
    "generate_prompt",
    "MarkdownStorage",
    "generate_file_path",
]
