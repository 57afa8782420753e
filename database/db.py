from sqlalchemy import create_engine               # SQLAlchemy 엔진 생성 도구
from sqlalchemy.orm import declarative_base        # 모델의 Base 클래스
from sqlalchemy.orm import sessionmaker            # 세션 팩토리 함수

from config.settings import settings               # ✅ 환경변수 설정 파일 불러오기

# ✅ 환경변수에서 DB 연결 URL을 불러와 엔진 생성
engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, pool_pre_ping=True)

# ✅ 세션 팩토리: 요청마다 하나의 세션을 만들어 쓰고 닫는다
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


# ==========================================================
# [공통] DB 세션 관리 (FastAPI 의존성)
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ==========================================================
# [공통] 모델 등록 / 테이블 생성
# ==========================================================
def load_models():
    # relationship("...") 문자열 참조가 풀리도록 모든 모델 모듈을 한 번에 등록
    import models.providers       # noqa: F401
    import models.categories      # noqa: F401
    import models.notices         # noqa: F401
    import models.users           # noqa: F401
    import models.scraps          # noqa: F401
    import models.notice_requests # noqa: F401


def create_tables(bind=None):
    load_models()
    Base.metadata.create_all(bind=bind or engine)
