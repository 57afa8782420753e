from models.categories import Category
from models.notices import Notice
from models.providers import Provider
from scripts.import_notices import migrate_notices

CSV_TEXT = """title,content,date,writer,url,provider,category,mapped_category
수강신청 안내,본문,2024-02-01,학사팀,https://a.example.ac.kr/1,정보대학,학부공지,공지사항
장학 안내,본문,2024-02-03,행정실,https://a.example.ac.kr/2,정보대학,학부공지,공지사항
세미나,,2024-03-01,,https://b.example.ac.kr/1,미디어학부,행사,
"""


def test_migrate_notices_creates_reference_data(tmp_path, db):
    path = tmp_path / "notices.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")

    inserted = migrate_notices(str(path), db=db)

    assert inserted == 3
    assert db.query(Provider).count() == 2
    assert db.query(Category).count() == 2
    event = db.query(Category).filter(Category.name == "행사").one()
    assert event.mapped_category == "행사"
    assert all(n.view == 0 for n in db.query(Notice).all())


def test_migrate_notices_skips_known_urls(tmp_path, db):
    path = tmp_path / "notices.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")

    migrate_notices(str(path), db=db)
    again = migrate_notices(str(path), db=db)

    assert again == 0
    assert db.query(Notice).count() == 3
