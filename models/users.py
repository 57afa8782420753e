from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base

class User(Base):
    __tablename__ = "users"  # 사용자 테이블 (가입/인증은 외부 인증 서버에서 관리)

    id = Column(Integer, primary_key=True, index=True)    # 사용자 고유 ID
    name = Column(String(100), nullable=False)            # 사용자 이름

    scrap_boxes = relationship("ScrapBox", back_populates="user")
