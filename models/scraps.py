from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base

class ScrapBox(Base):
    __tablename__ = "scrap_boxes"  # 사용자별 스크랩함 (사용자당 1개)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)   # 스크랩함 고유 ID
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)        # 소유 사용자 ID

    user = relationship("User", back_populates="scrap_boxes")
    scraps = relationship("Scrap", back_populates="scrap_box")


class Scrap(Base):
    __tablename__ = "scraps"  # 스크랩(북마크) 테이블

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)          # 스크랩 고유 ID
    scrap_box_id = Column(Integer, ForeignKey("scrap_boxes.id"), nullable=False)    # 스크랩함 ID
    notice_id = Column(Integer, ForeignKey("notices.id"), nullable=False)           # 공지 ID

    scrap_box = relationship("ScrapBox", back_populates="scraps")
    notice = relationship("Notice", back_populates="scraps")
