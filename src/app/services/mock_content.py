"""
Mock Content Generator.

명세/티켓/분석 텍스트를 문자열 조합으로 생성하는 순수 함수 모음.
실제 LLM 호출 없이 UI 개발/테스트용 placeholder 데이터를 만든다.

- I/O 없음
- 식별자만 IdSource에 의존 (호출마다 고유)
"""

from src.core.ids import IdSource, default_id_source
from src.domain.schemas import Project, Specification, SpecType, Ticket, TicketStatus

DEFAULT_TICKET_COUNT = 5

PROMPT_TEMPLATES = {
    SpecType.ANALYSIS: "Analyze the following and provide detailed requirements:\n\n{context}",
    SpecType.FIXES: "Identify and suggest fixes for issues in:\n\n{context}",
    SpecType.PLANS: "Create a detailed implementation plan for:\n\n{context}",
    SpecType.REVIEWS: "Review and provide feedback on:\n\n{context}",
}


def generate_specification(
    project_id: str,
    spec_type: SpecType,
    prompt: str,
    ids: IdSource | None = None,
) -> Specification:
    """
    명세 생성.

    Args:
        project_id: 프로젝트 ID
        spec_type: 명세 유형
        prompt: 자유 입력 프롬프트
        ids: 식별자 소스 (None이면 공용 소스)

    Returns:
        content가 "라벨 + prompt"인 Specification (tickets 비어 있음)
    """
    ids = ids or default_id_source()
    spec_type = SpecType(spec_type)
    now = ids.now_iso()

    return Specification(
        id=str(ids.next_timestamp()),
        type=spec_type,
        content=f"Generated specification for {spec_type.value}:\n\n{prompt}",
        project_id=project_id,
        tickets=[],
        created_at=now,
        updated_at=now,
    )


def generate_tickets(
    specification: Specification,
    count: int = DEFAULT_TICKET_COUNT,
    ids: IdSource | None = None,
) -> list[Ticket]:
    """
    명세를 티켓으로 분할 (mock).

    Args:
        specification: 원본 명세
        count: 생성할 티켓 수 (1..count 번호)
        ids: 식별자 소스

    Returns:
        순서대로 번호 매겨진 Ticket 목록
    """
    ids = ids or default_id_source()
    base = ids.next_timestamp()
    now = ids.now_iso()
    type_name = specification.type.value

    return [
        Ticket(
            id=f"{base}-{i}",
            title=f"{type_name} Task {i}",
            description=f"Task {i} extracted from specification {specification.id}",
            status=TicketStatus.TODO,
            spec_type=specification.type,
            created_at=now,
            updated_at=now,
        )
        for i in range(1, count + 1)
    ]


def analyze_project(project: Project) -> str:
    """프로젝트 분석 텍스트 (이름 외 내용은 고정)."""
    return (
        f"Analysis for project: {project.name}\n\n"
        "This project needs:\n"
        "- Requirements analysis\n"
        "- Technical specification\n"
        "- Implementation plan"
    )


def generate_prompt(spec_type: SpecType, context: str) -> str:
    """유형별 템플릿에 context를 채운 프롬프트."""
    return PROMPT_TEMPLATES[SpecType(spec_type)].format(context=context)
