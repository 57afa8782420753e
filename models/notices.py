from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base

class Notice(Base):
    __tablename__ = "notices"  # 공지사항 테이블

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)       # 공지 고유 ID
    title = Column(String(200), nullable=False)                                  # 공지 제목
    content = Column(Text, nullable=False, default="")                           # 공지 본문
    date = Column(Date, nullable=False, index=True)                              # 게시일자
    writer = Column(String(100), nullable=False, default="")                     # 작성자
    url = Column(String(500), nullable=False)                                    # 원문 링크
    view = Column(Integer, nullable=False, default=0)                            # 조회수 (상세 조회마다 +1)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)   # 카테고리 ID

    category = relationship("Category", back_populates="notices")
    scraps = relationship("Scrap", back_populates="notice")
