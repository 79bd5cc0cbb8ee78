"""
test_mock_content.py - Mock Content Generator 테스트

검증 포인트:
1. 명세 content = 라벨 + prompt, tickets 비어 있음
2. 티켓 count개, 1..count 순서, status todo
3. 분석 텍스트는 프로젝트 이름만 반영
4. 유형별 프롬프트 템플릿
"""

import pytest

from src.app.services.mock_content import (
    analyze_project,
    generate_prompt,
    generate_specification,
    generate_tickets,
)
from src.core.ids import IdSource
from src.domain.schemas import Project, SpecType, TicketStatus

# =============================================================================
# generate_specification 테스트
# =============================================================================


class TestGenerateSpecification:
    """generate_specification 함수 테스트."""

    def test_content_concatenates_label_and_prompt(self, fixed_ids: IdSource):
        """content = 고정 라벨 + prompt."""
        spec = generate_specification("proj-1", SpecType.PLANS, "Build a login page", ids=fixed_ids)

        assert spec.content == "Generated specification for PLANS:\n\nBuild a login page"
        assert spec.type == SpecType.PLANS
        assert spec.project_id == "proj-1"
        assert spec.tickets == []

    def test_id_from_timestamp(self, fixed_ids: IdSource, fixed_epoch_ms: int):
        """id = 타임스탬프 문자열."""
        spec = generate_specification("proj-1", SpecType.ANALYSIS, "x", ids=fixed_ids)

        assert spec.id == str(fixed_epoch_ms)
        assert spec.created_at == spec.updated_at

    def test_accepts_type_string(self, fixed_ids: IdSource):
        """문자열 유형도 허용."""
        spec = generate_specification("proj-1", "FIXES", "x", ids=fixed_ids)

        assert spec.type is SpecType.FIXES

    def test_unique_ids_per_call(self):
        """호출마다 다른 id."""
        first = generate_specification("p", SpecType.REVIEWS, "a")
        second = generate_specification("p", SpecType.REVIEWS, "a")

        assert first.id != second.id

    def test_to_dict_camel_case(self, fixed_ids: IdSource):
        """JSON 직렬화 키."""
        data = generate_specification("proj-1", SpecType.PLANS, "x", ids=fixed_ids).to_dict()

        assert data["projectId"] == "proj-1"
        assert data["type"] == "PLANS"
        assert data["tickets"] == []
        assert "createdAt" in data and "updatedAt" in data


# =============================================================================
# generate_tickets 테스트
# =============================================================================


class TestGenerateTickets:
    """generate_tickets 함수 테스트."""

    @pytest.fixture
    def specification(self, fixed_ids: IdSource):
        return generate_specification("proj-1", SpecType.FIXES, "fix bugs", ids=fixed_ids)

    def test_default_count_five(self, specification, fixed_ids: IdSource):
        """기본 5개, 제목 순서, status todo."""
        tickets = generate_tickets(specification, ids=fixed_ids)

        assert len(tickets) == 5
        assert [t.title for t in tickets] == [f"FIXES Task {i}" for i in range(1, 6)]
        assert all(t.status == TicketStatus.TODO for t in tickets)

    def test_custom_count(self, specification, fixed_ids: IdSource):
        """count 지정."""
        tickets = generate_tickets(specification, count=3, ids=fixed_ids)

        assert [t.title for t in tickets] == ["FIXES Task 1", "FIXES Task 2", "FIXES Task 3"]

    def test_zero_count(self, specification, fixed_ids: IdSource):
        """count=0 → 빈 목록."""
        assert generate_tickets(specification, count=0, ids=fixed_ids) == []

    def test_description_references_specification(self, specification, fixed_ids: IdSource):
        """설명에 명세 id 포함."""
        tickets = generate_tickets(specification, count=2, ids=fixed_ids)

        assert tickets[1].description == f"Task 2 extracted from specification {specification.id}"
        assert tickets[0].spec_type == SpecType.FIXES

    def test_ids_unique_within_batch(self, specification, fixed_ids: IdSource):
        """배치 내 id 고유, 번호 suffix."""
        tickets = generate_tickets(specification, ids=fixed_ids)

        ids = [t.id for t in tickets]
        assert len(set(ids)) == 5
        assert all(t.id.endswith(f"-{i}") for i, t in enumerate(tickets, start=1))

    def test_ticket_to_dict(self, specification, fixed_ids: IdSource):
        """JSON 직렬화."""
        data = generate_tickets(specification, count=1, ids=fixed_ids)[0].to_dict()

        assert data["status"] == "todo"
        assert data["specType"] == "FIXES"
        assert data["title"] == "FIXES Task 1"


# =============================================================================
# analyze_project / generate_prompt 테스트
# =============================================================================


class TestAnalyzeProject:
    """analyze_project 함수 테스트."""

    def test_mentions_name_only(self):
        """이름만 반영, 나머지 고정."""
        a = analyze_project(Project(id="1", name="Billing", description="payments"))
        b = analyze_project(Project(id="2", name="Billing", description="other"))

        assert a == b
        assert a.startswith("Analysis for project: Billing\n\n")
        assert "- Implementation plan" in a


class TestGeneratePrompt:
    """generate_prompt 함수 테스트."""

    @pytest.mark.parametrize(
        ("spec_type", "prefix"),
        [
            (SpecType.ANALYSIS, "Analyze the following and provide detailed requirements:"),
            (SpecType.FIXES, "Identify and suggest fixes for issues in:"),
            (SpecType.PLANS, "Create a detailed implementation plan for:"),
            (SpecType.REVIEWS, "Review and provide feedback on:"),
        ],
    )
    def test_template_by_type(self, spec_type: SpecType, prefix: str):
        """유형별 템플릿 + context."""
        assert generate_prompt(spec_type, "the API") == f"{prefix}\n\nthe API"

    def test_context_with_braces(self):
        """context의 중괄호는 그대로."""
        assert generate_prompt(SpecType.REVIEWS, "{x}").endswith("{x}")
