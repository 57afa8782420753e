from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base

class Category(Base):
    __tablename__ = "categories"  # 공지 카테고리 테이블

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)        # 카테고리 고유 ID
    name = Column(String(100), nullable=False)                                    # 제공처 원본 게시판 이름
    mapped_category = Column(String(50), nullable=False, index=True)              # 통합 분류 라벨 (예: 공지사항, 학사)
    provider_id = Column(Integer, ForeignKey("providers.id"), nullable=False)     # 소속 제공처 ID

    provider = relationship("Provider", back_populates="categories")
    notices = relationship("Notice", back_populates="category")
