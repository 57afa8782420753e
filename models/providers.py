from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base

class Provider(Base):
    __tablename__ = "providers"  # 공지 제공처(학과/기관) 테이블

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)  # 제공처 고유 ID
    name = Column(String(100), nullable=False, unique=True)                 # 제공처 이름 (예: 정보대학)

    categories = relationship("Category", back_populates="provider")
