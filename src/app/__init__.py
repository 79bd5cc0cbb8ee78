"""
App layer: API 서버 (FastAPI).

역할:
- /api/git: Git 연동 operation (upstream 전달 또는 mock)
- /api/code-analyzer: 코드 분석 operation
- 서비스: mock 콘텐츠 생성, Markdown 스토리지
"""
