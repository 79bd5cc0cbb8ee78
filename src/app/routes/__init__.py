"""
FastAPI Routes.

API 라우트 (JSON): git, code analyzer
"""

from . import code_analyzer, git

__all__ = ["code_analyzer", "git"]
