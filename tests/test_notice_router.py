from models.notice_requests import NoticeRequest
from models.notices import Notice


def test_list_requires_auth(client, seed):
    response = client.get("/notice/list")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_FAILED"
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_list_rejects_invalid_token(client, seed):
    response = client.get("/notice/list", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "TOKEN_INVALID"


def test_list_with_filter_query(client, seed, auth_headers):
    response = client.get(
        "/notice/list",
        params={"categories": "공지사항", "start_date": "2020-01-01", "end_date": "2024-01-01"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["page"] == 1
    assert body["totalNotice"] == 1
    assert body["totalPage"] == 1
    assert body["notices"] == [
        {"id": seed["old"], "title": "정보대학 장학금 신청 안내", "date": "2021-06-01", "scrapped": False}
    ]
    assert "X-Latency-Ms" in response.headers


def test_list_keyword(client, seed, auth_headers):
    response = client.get("/notice/list", params={"keyword": "REGISTRATION"}, headers=auth_headers)

    assert [n["id"] for n in response.json()["notices"]] == [seed["new"]]


def test_list_validates_query(client, seed, auth_headers):
    bad_date = client.get("/notice/list", params={"start_date": "yesterday"}, headers=auth_headers)
    bad_page = client.get("/notice/list", params={"page": 0}, headers=auth_headers)
    reversed_range = client.get(
        "/notice/list", params={"start_date": "2024-01-01", "end_date": "2020-01-01"}, headers=auth_headers
    )

    assert bad_date.status_code == 422
    assert bad_page.status_code == 422
    assert reversed_range.status_code == 422
    assert reversed_range.json()["error"]["code"] == "INVALID_DATE_RANGE"


def test_scrap_toggle_and_scrap_list(client, seed, auth_headers):
    first = client.put(f"/notice/{seed['new']}/scrap/1", headers=auth_headers)
    scrapped = client.get("/notice/scrap", headers=auth_headers).json()
    listed = client.get("/notice/list", headers=auth_headers).json()
    second = client.put(f"/notice/{seed['new']}/scrap/1", headers=auth_headers)

    assert first.json() is True
    assert second.json() is False
    assert [n["id"] for n in scrapped["notices"]] == [seed["new"]]
    assert {n["id"]: n["scrapped"] for n in listed["notices"]} == {seed["new"]: True, seed["old"]: False}


def test_scrap_unknown_notice_is_404(client, seed, auth_headers):
    response = client.put("/notice/999/scrap/1", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOTICE_NOT_FOUND"


def test_notice_info(client, seed, auth_headers, db):
    response = client.get(f"/notice/info/{seed['old']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "id": seed["old"],
        "title": "정보대학 장학금 신청 안내",
        "content": "2학기 장학금 신청 기간입니다.",
        "date": "2021-06-01",
        "view": 1,
        "url": "https://info.example.ac.kr/notice/1",
        "scrapped": False,
        "writer": "행정실",
        "scrapCount": 0,
        "category": "학부공지",
        "provider": "정보대학",
    }
    db.expire_all()
    assert db.get(Notice, seed["old"]).view == 1


def test_notice_info_unknown_is_404(client, seed, auth_headers):
    response = client.get("/notice/info/999", headers=auth_headers)

    assert response.status_code == 404
    assert "generated_at" in response.json()


def test_category_and_provider_routes(client, seed, auth_headers):
    by_category = client.get(f"/notice/category/{seed['notice_category']}", headers=auth_headers)
    by_provider = client.get(f"/notice/provider/{seed['media_provider']}", headers=auth_headers)
    missing = client.get("/notice/category/999", headers=auth_headers)

    assert [n["id"] for n in by_category.json()["notices"]] == [seed["old"]]
    assert [n["id"] for n in by_provider.json()["notices"]] == [seed["new"]]
    assert missing.status_code == 404


def test_search_route(client, seed, auth_headers):
    response = client.get("/notice/search", params={"keyword": "학사팀"}, headers=auth_headers)

    assert response.json()["totalNotice"] == 1


def test_add_request(client, seed, auth_headers, db):
    response = client.post(
        "/notice/add-request",
        json={"url": "https://law.example.ac.kr/notice", "title": "법학과 공지 추가 부탁드립니다"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.content == b""
    assert db.query(NoticeRequest).count() == 1


def test_add_request_rejects_bad_url(client, seed, auth_headers):
    response = client.post("/notice/add-request", json={"url": "not a url"}, headers=auth_headers)

    assert response.status_code == 422


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_huge_page_number_returns_empty_page(client, seed, auth_headers):
    listed = client.get("/notice/list", params={"page": 10**19}, headers=auth_headers)
    scrapped = client.get("/notice/scrap", params={"page": 10**19}, headers=auth_headers)

    assert listed.status_code == 200
    assert listed.json()["notices"] == []
    assert listed.json()["totalNotice"] == 2
    assert scrapped.status_code == 200
    assert scrapped.json()["notices"] == []
