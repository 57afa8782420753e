import csv
import logging
import sys
from datetime import date

from sqlalchemy.orm import Session
from database.db import SessionLocal, load_models
from models.categories import Category as CategoryModel
from models.notices import Notice as NoticeModel
from models.providers import Provider as ProviderModel

logger = logging.getLogger(__name__)

CSV_PATH = "data/notices.csv"  # ✅ 기본 파일 경로

# CSV 컬럼: title, content, date, writer, url, provider, category, mapped_category


def _get_or_create_provider(db: Session, cache: dict, name: str) -> ProviderModel:
    if name not in cache:
        provider = db.query(ProviderModel).filter(ProviderModel.name == name).first()
        if provider is None:
            provider = ProviderModel(name=name)
            db.add(provider)
            db.flush()
        cache[name] = provider
    return cache[name]


def _get_or_create_category(db: Session, cache: dict, provider: ProviderModel, name: str, mapped: str) -> CategoryModel:
    key = (provider.id, name)
    if key not in cache:
        category = (
            db.query(CategoryModel)
            .filter(CategoryModel.provider_id == provider.id, CategoryModel.name == name)
            .first()
        )
        if category is None:
            category = CategoryModel(name=name, mapped_category=mapped or name, provider_id=provider.id)
            db.add(category)
            db.flush()
        cache[key] = category
    return cache[key]


def migrate_notices(csv_path: str = CSV_PATH, db: Session = None) -> int:
    """CSV → DB 마이그레이션. 이미 있는 url 은 건너뛰고, 추가한 공지 수를 반환"""
    load_models()
    own_session = db is None
    db = db or SessionLocal()
    providers, categories, seen_urls = {}, {}, set()
    inserted = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                url = row["url"].strip()
                if url in seen_urls or db.query(NoticeModel.id).filter(NoticeModel.url == url).first():
                    continue

                provider = _get_or_create_provider(db, providers, row["provider"].strip())
                category = _get_or_create_category(
                    db, categories, provider, row["category"].strip(), (row.get("mapped_category") or "").strip()
                )
                notice = NoticeModel(
                    title=row["title"],                              # 공지 제목
                    content=row.get("content") or "",                # 공지 본문
                    date=date.fromisoformat(row["date"].strip()),    # 게시일자
                    writer=row.get("writer") or "",                  # 작성자
                    url=url,                                         # 원문 링크
                    view=0,
                    category_id=category.id,
                )
                db.add(notice)
                seen_urls.add(url)
                inserted += 1
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        if own_session:
            db.close()

    logger.info(f"공지사항 CSV → DB 마이그레이션 완료: {inserted}건 추가")
    return inserted

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    migrate_notices(sys.argv[1] if len(sys.argv) > 1 else CSV_PATH)
