from fastapi import Depends
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from repositories.notice_repository import NoticeRepository
from repositories.notice_request_repository import NoticeRequestRepository
from repositories.scrap_repository import ScrapRepository
from services.notice_service import NoticeService


def get_notice_service(db: Session = Depends(get_db)) -> NoticeService:
    # 요청마다 세션 하나 → 저장소 → 서비스 순으로 명시적으로 조립
    return NoticeService(
        notices=NoticeRepository(db),
        scraps=ScrapRepository(db),
        requests=NoticeRequestRepository(db),
        default_start_date=settings.NOTICE_DEFAULT_START_DATE,
        default_end_date=settings.NOTICE_DEFAULT_END_DATE,
    )
