"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 에러 응답 표준: ErrorDetail, ErrorResponse
  2) 페이지네이션: PageQuery, total_pages()
"""

from __future__ import annotations

from datetime import datetime, timezone
from math import ceil
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


# =========================================================
# 1) 에러 응답 표준
# =========================================================

class ErrorDetail(BaseModel):
    """에러 코드/메시지를 담는 최소 단위"""
    code: str = Field(..., description="에러 식별 코드 (예: INTERNAL_ERROR, NOTICE_NOT_FOUND)")
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")

class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러에서 내려주는 표준 에러 응답
    - middlewares/error_handler.py 와 같은 모양이며 Swagger responses 문서화에 사용
    """
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="응답 생성 시각 (UTC)"
    )
    latency_ms: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(extra="ignore")


# =========================================================
# 2) 페이지네이션
# =========================================================

class PageQuery(BaseModel):
    """
    목록 조회 시 공통으로 쓰는 페이징 파라미터
    - page: 1부터 시작, 페이지 크기는 10개 고정 (services.notice_service.DEFAULT_PAGE_SIZE)
    """
    page: int = Field(1, ge=1, description="현재 페이지(1부터 시작)")

    model_config = ConfigDict(extra="ignore")


def total_pages(total: int, size: int) -> int:
    """전체 개수로 총 페이지 수 계산 (0건이면 0페이지)"""
    return ceil(total / max(1, size))
