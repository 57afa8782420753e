"""
services/notice_service.py

공지 목록/상세/스크랩 비즈니스 로직.

- 모든 목록은 최신순, 페이지당 page_size(기본 10)개, page는 1부터 시작
- 목록의 scrapped 값은 "사용자 스크랩 ID 집합"을 따로 읽어 메모리에서 표시한다
  (공지 조회와 스크랩 조회는 서로 다른 쿼리이며 하나의 트랜잭션으로 묶지 않음)
- 범위를 벗어난 페이지는 빈 목록 + 정상 total 값을 돌려준다
"""

import logging
from datetime import date
from typing import Iterable, Optional, Set

from core.exceptions import ErrorCode, NotFoundError, ValidationError
from repositories.notice_repository import NoticeRepository
from repositories.notice_request_repository import NoticeRequestRepository
from repositories.scrap_repository import ScrapRepository
from schemas.common import total_pages
from schemas.notices import (
    NoticeFilter,
    NoticeInfo,
    NoticeListItem,
    NoticeRequestCreate,
    PagedNoticeList,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
DEFAULT_START_DATE = date(2020, 1, 1)
DEFAULT_END_DATE = date(2040, 1, 1)


class NoticeService:
    def __init__(
        self,
        notices: NoticeRepository,
        scraps: ScrapRepository,
        requests: NoticeRequestRepository,
        page_size: int = DEFAULT_PAGE_SIZE,
        default_start_date: date = DEFAULT_START_DATE,
        default_end_date: date = DEFAULT_END_DATE,
    ):
        self.notices = notices
        self.scraps = scraps
        self.requests = requests
        self.page_size = page_size
        self.default_start_date = default_start_date
        self.default_end_date = default_end_date

    # ==========================================================
    # [공통] 페이지 계산 / DTO 변환
    # ==========================================================
    def _offset(self, page: int) -> int:
        if page < 1:
            raise ValidationError(f"page는 1 이상이어야 합니다: {page}")
        return (page - 1) * self.page_size

    def _to_page(self, records: Iterable, total: int, page: int, scrapped_ids: Optional[Set[int]] = None) -> PagedNoticeList:
        # scrapped_ids가 None이면 "스크랩 목록" 조회이므로 전부 True
        items = [
            NoticeListItem(
                id=n.id,
                title=n.title,
                date=n.date,
                scrapped=True if scrapped_ids is None else n.id in scrapped_ids,
            )
            for n in records
        ]
        return PagedNoticeList(
            notices=items,
            page=page,
            total_notice=total,
            total_page=total_pages(total, self.page_size),
        )

    def _annotated_page(self, user_id: int, page: int, **criteria) -> PagedNoticeList:
        offset = self._offset(page)
        scrapped_ids = self.scraps.find_notice_ids_by_user(user_id)
        records, total = self.notices.find_and_count(offset=offset, limit=self.page_size, **criteria)
        return self._to_page(records, total, page, scrapped_ids)

    def _date_range(self, notice_filter: NoticeFilter):
        start = notice_filter.start_date or self.default_start_date
        end = notice_filter.end_date or self.default_end_date
        if start > end:
            raise ValidationError(
                f"start_date({start})가 end_date({end})보다 늦습니다",
                code=ErrorCode.INVALID_DATE_RANGE,
            )
        return start, end

    # ==========================================================
    # [목록] 최신순 / 필터 / 카테고리 / 제공처 / 검색
    # ==========================================================
    def get_notices_by_time(self, user_id: int, page: int = 1) -> PagedNoticeList:
        return self._annotated_page(user_id, page)

    def get_notices_by_filter(self, user_id: int, notice_filter: NoticeFilter, page: int = 1) -> PagedNoticeList:
        return self.get_notice_list(user_id, page, notice_filter)

    def get_notices_by_category(self, user_id: int, category_id: int, page: int = 1) -> PagedNoticeList:
        if not self.notices.category_exists(category_id):
            raise NotFoundError(f"카테고리를 찾을 수 없습니다: {category_id}", code=ErrorCode.CATEGORY_NOT_FOUND)
        return self._annotated_page(user_id, page, category_id=category_id)

    def get_notices_by_provider(self, user_id: int, provider_id: int, page: int = 1) -> PagedNoticeList:
        if not self.notices.provider_exists(provider_id):
            raise NotFoundError(f"제공처를 찾을 수 없습니다: {provider_id}", code=ErrorCode.PROVIDER_NOT_FOUND)
        return self._annotated_page(user_id, page, provider_id=provider_id)

    def search_notices(self, keyword: Optional[str], user_id: int, page: int = 1) -> PagedNoticeList:
        """제목/본문/작성자 부분 일치 검색 (대소문자 무시)"""
        return self._annotated_page(user_id, page, keyword=(keyword or "").strip() or None)

    def get_notice_list(
        self,
        user_id: int,
        page: int = 1,
        notice_filter: Optional[NoticeFilter] = None,
        keyword: Optional[str] = None,
    ) -> PagedNoticeList:
        """GET /notice/list 진입점: 필터 + (선택) 키워드를 AND 로 적용"""
        notice_filter = notice_filter or NoticeFilter()
        start, end = self._date_range(notice_filter)
        return self._annotated_page(
            user_id,
            page,
            start_date=start,
            end_date=end,
            mapped_categories=notice_filter.category_list,
            provider_names=notice_filter.provider_list,
            keyword=(keyword or "").strip() or None,
        )

    def get_scrapped_notices(self, user_id: int, page: int = 1) -> PagedNoticeList:
        records, total = self.scraps.find_scrapped_notices(user_id, self._offset(page), self.page_size)
        return self._to_page(records, total, page)

    # ==========================================================
    # [스크랩] 토글
    # ==========================================================
    def scrap_notice(self, user_id: int, notice_id: int, scrap_box_id: Optional[int] = None) -> bool:
        """
        스크랩 토글. 이미 있으면 삭제 후 False, 없으면 추가 후 True.
        대상은 항상 요청 사용자 본인의 스크랩함이며 scrap_box_id는 참고값으로만 받는다.
        """
        if not self.notices.exists(notice_id):
            raise NotFoundError(f"공지사항을 찾을 수 없습니다: {notice_id}", code=ErrorCode.NOTICE_NOT_FOUND)

        existing = self.scraps.find_one(user_id, notice_id)
        if existing is not None:
            if scrap_box_id is not None and existing.scrap_box_id != scrap_box_id:
                logger.warning(f"scrap_box_id 불일치 무시: user={user_id} 요청={scrap_box_id} 실제={existing.scrap_box_id}")
            self.scraps.delete(existing.id)
            logger.info(f"스크랩 해제: user={user_id} notice={notice_id}")
            return False

        box = self.scraps.get_or_create_box(user_id)
        if scrap_box_id is not None and box.id != scrap_box_id:
            logger.warning(f"scrap_box_id 불일치 무시: user={user_id} 요청={scrap_box_id} 실제={box.id}")
        self.scraps.insert(box.id, notice_id)
        logger.info(f"스크랩 추가: user={user_id} notice={notice_id}")
        return True

    # ==========================================================
    # [상세] 조회 + 조회수 증가
    # ==========================================================
    def get_notice_info(self, notice_id: int, user_id: int) -> NoticeInfo:
        notice = self.notices.get_with_category(notice_id)
        if notice is None:
            raise NotFoundError(f"공지사항을 찾을 수 없습니다: {notice_id}", code=ErrorCode.NOTICE_NOT_FOUND)

        self.notices.increment_view(notice_id)
        logger.debug(f"조회수 증가: notice={notice_id}")

        return NoticeInfo(
            id=notice.id,
            title=notice.title,
            content=notice.content,
            date=notice.date,
            view=notice.view,
            url=notice.url,
            scrapped=self.scraps.find_one(user_id, notice_id) is not None,
            writer=notice.writer,
            scrap_count=self.scraps.count_by_notice(notice_id),
            category=notice.category.name,
            provider=notice.category.provider.name,
        )

    # ==========================================================
    # [요청] 공지 추가 요청
    # ==========================================================
    def add_notice_request(self, user_id: int, payload: NoticeRequestCreate) -> None:
        data = payload.model_dump()
        data["url"] = str(payload.url)
        request = self.requests.add(user_id, **data)
        logger.info(f"공지 추가 요청 접수: id={request.id} user={user_id} url={request.url}")
