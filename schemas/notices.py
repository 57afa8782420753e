from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


# ==========================================================
# [입력용 스키마]
# ==========================================================
class NoticeFilter(BaseModel):
    """목록 필터 (카테고리/제공처는 콤마 구분 문자열)"""
    categories: Optional[str] = Field(default=None, examples=["공지사항"])
    providers: Optional[str] = Field(default=None, examples=["정보대학,미디어학부"])
    start_date: Optional[date] = Field(default=None, examples=["2020-01-01"])
    end_date: Optional[date] = Field(default=None, examples=["2040-01-01"])

    @staticmethod
    def split(value: Optional[str]) -> List[str]:
        # "a, b,,c" → ["a", "b", "c"], 빈 값/None → [] (필터 없음)
        if not value:
            return []
        return [item.strip() for item in value.split(",") if item.strip()]

    @property
    def category_list(self) -> List[str]:
        return self.split(self.categories)

    @property
    def provider_list(self) -> List[str]:
        return self.split(self.providers)


class NoticeRequestCreate(BaseModel):
    """사용자 공지 추가 요청"""
    url: HttpUrl                                   # 추가 요청 링크
    title: Optional[str] = Field(default=None, max_length=200)
    provider: Optional[str] = Field(default=None, max_length=100)
    category: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)


# ==========================================================
# [출력용 스키마]
# ==========================================================
class NoticeListItem(BaseModel):
    id: int                                        # 공지 고유 ID
    title: str                                     # 제목
    date: date                                     # 게시일자
    scrapped: bool                                 # 요청 사용자의 스크랩 여부

    model_config = ConfigDict(from_attributes=True)


class PagedNoticeList(BaseModel):
    notices: List[NoticeListItem]
    page: int
    total_notice: int = Field(alias="totalNotice")
    total_page: int = Field(alias="totalPage")

    model_config = ConfigDict(populate_by_name=True)


class NoticeInfo(BaseModel):
    id: int
    title: str
    content: str
    date: date
    view: int
    url: str
    scrapped: bool
    writer: str
    scrap_count: int = Field(alias="scrapCount")
    category: str                                  # 카테고리 이름
    provider: str                                  # 제공처 이름

    model_config = ConfigDict(populate_by_name=True)
