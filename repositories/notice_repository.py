from datetime import date
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import or_, update
from sqlalchemy.orm import Session, joinedload

from models.categories import Category
from models.notices import Notice
from models.providers import Provider


class NoticeRepository:
    """notices / categories / providers 테이블 조회 전용 접근 객체"""

    def __init__(self, db: Session):
        self.db = db

    # ==========================================================
    # 목록 조회
    # ==========================================================
    def find_and_count(
        self,
        *,
        offset: int,
        limit: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        mapped_categories: Sequence[str] = (),
        provider_names: Sequence[str] = (),
        category_id: Optional[int] = None,
        provider_id: Optional[int] = None,
        keyword: Optional[str] = None,
    ) -> Tuple[List[Notice], int]:
        """
        조건에 맞는 공지를 최신순으로 한 페이지 가져오고, 페이지와 무관한 전체 개수도 함께 반환한다.
        빈 목록/None 조건은 "조건 없음"으로 취급한다.
        """
        query = self.db.query(Notice)

        if mapped_categories or provider_names or provider_id is not None:
            query = query.join(Notice.category)
        if provider_names:
            query = query.join(Category.provider)

        if start_date is not None:
            query = query.filter(Notice.date >= start_date)
        if end_date is not None:
            query = query.filter(Notice.date <= end_date)
        if mapped_categories:
            query = query.filter(Category.mapped_category.in_(list(mapped_categories)))
        if provider_names:
            query = query.filter(Provider.name.in_(list(provider_names)))
        if category_id is not None:
            query = query.filter(Notice.category_id == category_id)
        if provider_id is not None:
            query = query.filter(Category.provider_id == provider_id)
        if keyword:
            # %, _ 도 글자 그대로 비교 (LIKE 와일드카드 이스케이프)
            query = query.filter(
                or_(
                    Notice.title.icontains(keyword, autoescape=True),
                    Notice.content.icontains(keyword, autoescape=True),
                    Notice.writer.icontains(keyword, autoescape=True),
                )
            )

        total = query.count()
        if offset >= total:
            # 범위를 벗어난 페이지는 OFFSET 값을 DB로 넘기지 않고 빈 목록
            return [], total
        records = (
            query.order_by(Notice.date.desc(), Notice.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return records, total

    # ==========================================================
    # 단건 조회 / 조회수
    # ==========================================================
    def get_with_category(self, notice_id: int) -> Optional[Notice]:
        return (
            self.db.query(Notice)
            .options(joinedload(Notice.category).joinedload(Category.provider))
            .filter(Notice.id == notice_id)
            .first()
        )

    def exists(self, notice_id: int) -> bool:
        return self.db.query(Notice.id).filter(Notice.id == notice_id).first() is not None

    def increment_view(self, notice_id: int) -> int:
        """view = view + 1 을 단일 UPDATE 문으로 실행 (동시 조회 시 증가분 유실 없음)"""
        result = self.db.execute(
            update(Notice)
            .where(Notice.id == notice_id)
            .values(view=Notice.view + 1)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount

    # ==========================================================
    # 참조 데이터 존재 확인
    # ==========================================================
    def category_exists(self, category_id: int) -> bool:
        return self.db.get(Category, category_id) is not None

    def provider_exists(self, provider_id: int) -> bool:
        return self.db.get(Provider, provider_id) is not None
