from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from database.db import Base

class NoticeRequest(Base):
    __tablename__ = "notice_requests"  # 사용자 공지 추가 요청 테이블 (검토 대기열)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)   # 요청 고유 ID
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)         # 요청한 사용자 ID
    url = Column(String(500), nullable=False)                                # 추가 요청한 게시판/공지 링크
    title = Column(String(200))                                              # 제목 (선택)
    provider = Column(String(100))                                           # 제공처 이름 (선택)
    category = Column(String(100))                                           # 카테고리 이름 (선택)
    description = Column(String(1000))                                       # 요청 사유 (선택)
    created_at = Column(DateTime, nullable=False,
                        default=lambda: datetime.now(timezone.utc))          # 요청 시각
