from typing import List, Optional, Set, Tuple

from sqlalchemy import delete, func
from sqlalchemy.orm import Session

from models.notices import Notice
from models.scraps import Scrap, ScrapBox


class ScrapRepository:
    """scrap_boxes / scraps 테이블 접근 객체"""

    def __init__(self, db: Session):
        self.db = db

    # ==========================================================
    # 조회
    # ==========================================================
    def find_notice_ids_by_user(self, user_id: int) -> Set[int]:
        """사용자가 스크랩한 공지 ID 전체 (목록의 scrapped 표시용)"""
        rows = (
            self.db.query(Scrap.notice_id)
            .join(Scrap.scrap_box)
            .join(Scrap.notice)
            .filter(ScrapBox.user_id == user_id)
            .all()
        )
        return {notice_id for (notice_id,) in rows}

    def find_scrapped_notices(self, user_id: int, offset: int, limit: int) -> Tuple[List[Notice], int]:
        query = (
            self.db.query(Notice)
            .join(Scrap, Scrap.notice_id == Notice.id)
            .join(ScrapBox, Scrap.scrap_box_id == ScrapBox.id)
            .filter(ScrapBox.user_id == user_id)
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

    def find_one(self, user_id: int, notice_id: int) -> Optional[Scrap]:
        return (
            self.db.query(Scrap)
            .join(Scrap.scrap_box)
            .filter(ScrapBox.user_id == user_id, Scrap.notice_id == notice_id)
            .first()
        )

    def count_by_notice(self, notice_id: int) -> int:
        return (
            self.db.query(func.count(Scrap.id))
            .filter(Scrap.notice_id == notice_id)
            .scalar()
        ) or 0

    # ==========================================================
    # 스크랩함 / 스크랩 변경
    # ==========================================================
    def get_or_create_box(self, user_id: int) -> ScrapBox:
        box = (
            self.db.query(ScrapBox)
            .filter(ScrapBox.user_id == user_id)
            .order_by(ScrapBox.id)
            .first()
        )
        if box is None:
            box = ScrapBox(user_id=user_id)
            self.db.add(box)
            self.db.commit()
            self.db.refresh(box)
        return box

    def insert(self, scrap_box_id: int, notice_id: int) -> Scrap:
        scrap = Scrap(scrap_box_id=scrap_box_id, notice_id=notice_id)
        self.db.add(scrap)
        self.db.commit()
        self.db.refresh(scrap)
        return scrap

    def delete(self, scrap_id: int) -> int:
        """id로 삭제, 이미 지워진 경우 0 반환 (중복 삭제는 no-op)"""
        result = self.db.execute(
            delete(Scrap)
            .where(Scrap.id == scrap_id)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount
