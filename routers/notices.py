from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from dependencies.security import AccessUser, get_current_user
from dependencies.services import get_notice_service
from schemas.common import ErrorResponse, PageQuery
from schemas.notices import NoticeFilter, NoticeInfo, NoticeRequestCreate, PagedNoticeList
from services.notice_service import NoticeService

router = APIRouter(
    prefix="/notice",
    tags=["공지사항"],
    responses={401: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)


# ==========================================================
# [공통] 요청 파라미터 추출
# ==========================================================
def get_page_query(page: int = Query(1, ge=1, description="페이지(1부터 시작)")) -> PageQuery:
    return PageQuery(page=page)


def get_notice_filter(
    categories: Optional[str] = Query(None, description="카테고리 목록(콤마 구분)", examples=["공지사항"]),
    providers: Optional[str] = Query(None, description="제공처 목록(콤마 구분)", examples=["정보대학,미디어학부"]),
    start_date: Optional[date] = Query(None, description="조회 시작일", examples=["2020-01-01"]),
    end_date: Optional[date] = Query(None, description="조회 종료일", examples=["2040-01-01"]),
) -> NoticeFilter:
    return NoticeFilter(categories=categories, providers=providers, start_date=start_date, end_date=end_date)


# ==========================================================
# [1단계] 목록 라우터
# ==========================================================

# ✅ [LIST] 필터 + 키워드 목록
@router.get("/list", response_model=PagedNoticeList)
def get_notice_list(
    keyword: Optional[str] = Query(None, description="제목/본문/작성자 검색어"),
    page_query: PageQuery = Depends(get_page_query),
    notice_filter: NoticeFilter = Depends(get_notice_filter),
    user: AccessUser = Depends(get_current_user),
    service: NoticeService = Depends(get_notice_service),
):
    return service.get_notice_list(user.id, page_query.page, notice_filter, keyword)


# ✅ [SCRAP LIST] 내가 스크랩한 공지
@router.get("/scrap", response_model=PagedNoticeList)
def get_scrapped_notices(
    page_query: PageQuery = Depends(get_page_query),
    user: AccessUser = Depends(get_current_user),
    service: NoticeService = Depends(get_notice_service),
):
    return service.get_scrapped_notices(user.id, page_query.page)


# ✅ [SEARCH] 키워드 검색
@router.get("/search", response_model=PagedNoticeList)
def search_notices(
    keyword: str = Query(..., description="제목/본문/작성자 검색어"),
    page_query: PageQuery = Depends(get_page_query),
    user: AccessUser = Depends(get_current_user),
    service: NoticeService = Depends(get_notice_service),
):
    return service.search_notices(keyword, user.id, page_query.page)


# ✅ [CATEGORY] 카테고리별 목록
@router.get("/category/{category_id}", response_model=PagedNoticeList, responses={404: {"model": ErrorResponse}})
def get_notices_by_category(
    category_id: int,
    page_query: PageQuery = Depends(get_page_query),
    user: AccessUser = Depends(get_current_user),
    service: NoticeService = Depends(get_notice_service),
):
    return service.get_notices_by_category(user.id, category_id, page_query.page)


# ✅ [PROVIDER] 제공처별 목록
@router.get("/provider/{provider_id}", response_model=PagedNoticeList, responses={404: {"model": ErrorResponse}})
def get_notices_by_provider(
    provider_id: int,
    page_query: PageQuery = Depends(get_page_query),
    user: AccessUser = Depends(get_current_user),
    service: NoticeService = Depends(get_notice_service),
):
    return service.get_notices_by_provider(user.id, provider_id, page_query.page)


# ==========================================================
# [2단계] 상세 / 스크랩 / 추가 요청
# ==========================================================

# ✅ [TOGGLE] 스크랩 토글 (true = 스크랩됨)
@router.put("/{notice_id}/scrap/{scrap_box_id}", response_model=bool, responses={404: {"model": ErrorResponse}})
def scrap_notice(
    notice_id: int,
    scrap_box_id: int,
    user: AccessUser = Depends(get_current_user),
    service: NoticeService = Depends(get_notice_service),
):
    return service.scrap_notice(user.id, notice_id, scrap_box_id)


# ✅ [READ] 공지 상세 (조회수 +1)
@router.get("/info/{notice_id}", response_model=NoticeInfo, responses={404: {"model": ErrorResponse}})
def get_notice_info(
    notice_id: int,
    user: AccessUser = Depends(get_current_user),
    service: NoticeService = Depends(get_notice_service),
):
    return service.get_notice_info(notice_id, user.id)


# ✅ [CREATE] 공지 추가 요청
@router.post("/add-request", status_code=status.HTTP_201_CREATED, response_class=Response)
def add_notice_request(
    body: NoticeRequestCreate,
    user: AccessUser = Depends(get_current_user),
    service: NoticeService = Depends(get_notice_service),
):
    service.add_notice_request(user.id, body)
    return Response(status_code=status.HTTP_201_CREATED)
