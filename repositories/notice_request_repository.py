from typing import Optional

from sqlalchemy.orm import Session

from models.notice_requests import NoticeRequest


class NoticeRequestRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(self, user_id: Optional[int], **fields) -> NoticeRequest:
        request = NoticeRequest(user_id=user_id, **fields)
        self.db.add(request)
        self.db.commit()
        self.db.refresh(request)
        return request
