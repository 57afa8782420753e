import os

# 앱 모듈 import 전에 테스트용 설정 주입
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("ENV", "test")

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base, create_tables, get_db, load_models
from dependencies.security import create_access_token
from repositories.notice_repository import NoticeRepository
from repositories.notice_request_repository import NoticeRequestRepository
from repositories.scrap_repository import ScrapRepository
from services.notice_service import NoticeService

load_models()

from models.categories import Category
from models.notices import Notice
from models.providers import Provider
from models.users import User


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seed(db):
    """정보대학/공지사항(2021-06-01), 미디어학부/학사(2025-01-01) 공지 2건과 사용자 2명"""
    info = Provider(name="정보대학")
    media = Provider(name="미디어학부")
    db.add_all([info, media])
    db.flush()

    notice_cat = Category(name="학부공지", mapped_category="공지사항", provider_id=info.id)
    academic_cat = Category(name="학사일정", mapped_category="학사", provider_id=media.id)
    db.add_all([notice_cat, academic_cat])
    db.flush()

    old = Notice(
        title="정보대학 장학금 신청 안내",
        content="2학기 장학금 신청 기간입니다.",
        date=date(2021, 6, 1),
        writer="행정실",
        url="https://info.example.ac.kr/notice/1",
        view=0,
        category_id=notice_cat.id,
    )
    new = Notice(
        title="Spring Semester Registration",
        content="수강신청 일정 안내",
        date=date(2025, 1, 1),
        writer="학사팀",
        url="https://media.example.ac.kr/notice/2",
        view=3,
        category_id=academic_cat.id,
    )
    db.add_all([old, new])
    db.add_all([User(id=1, name="tester"), User(id=2, name="other")])
    db.commit()

    return {
        "info_provider": info.id,
        "media_provider": media.id,
        "notice_category": notice_cat.id,
        "academic_category": academic_cat.id,
        "old": old.id,
        "new": new.id,
    }


def add_notices(db, category_id, count, start=date(2022, 1, 1)):
    """하루 간격으로 공지 count건 추가"""
    for i in range(count):
        db.add(Notice(
            title=f"bulk {i}",
            content="",
            date=start + timedelta(days=i),
            writer="bot",
            url=f"https://bulk.example.ac.kr/{category_id}/{i}",
            view=0,
            category_id=category_id,
        ))
    db.commit()


@pytest.fixture
def service(db):
    return NoticeService(
        notices=NoticeRepository(db),
        scraps=ScrapRepository(db),
        requests=NoticeRequestRepository(db),
    )


@pytest.fixture
def client(session_factory):
    from main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {create_access_token(1, 'tester')}"}


@pytest.fixture
def make_notices(db):
    return lambda category_id, count, start=date(2022, 1, 1): add_notices(db, category_id, count, start)
