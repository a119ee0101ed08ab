"""
Tests for the country code picker API
"""


def test_picker_screen(client):
    response = client.get("/api/v1/country-codes/")

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Choose your country"
    assert data["search_placeholder"] == "Search Country Codes"
    assert data["cancel_title"] == "Cancel"
    assert data["filtering"] is False
    assert data["total"] == len(data["rows"]) > 200
    assert data["rows"][0]["index"] == 0


def test_picker_screen_search(client):
    response = client.get("/api/v1/country-codes/", params={"search": "france"})

    assert response.status_code == 200
    data = response.json()
    assert data["filtering"] is True
    assert data["search"] == "france"
    codes = [row["country"]["code"] for row in data["rows"]]
    assert "FR" in codes
    france = next(row for row in data["rows"] if row["country"]["code"] == "FR")
    assert france["row"]["text"] == "+33 \U0001f1eb\U0001f1f7"
    assert france["row"]["detail"] == "France"


def test_picker_screen_empty_search_is_unfiltered(client):
    data = client.get("/api/v1/country-codes/", params={"search": ""}).json()

    assert data["filtering"] is False


def test_get_country(client):
    response = client.get("/api/v1/country-codes/fr")

    assert response.status_code == 200
    assert response.json() == {
        "code": "FR",
        "name": "France",
        "prefix": "+33",
        "flag": "\U0001f1eb\U0001f1f7",
    }


def test_get_country_localized(client):
    response = client.get("/api/v1/country-codes/DE", params={"locale": "de"})

    assert response.status_code == 200
    assert response.json()["name"] == "Deutschland"


def test_get_unknown_country(client):
    response = client.get("/api/v1/country-codes/ZZ")

    assert response.status_code == 404
    assert response.json()["type"] == "NotFoundError"


def test_unknown_locale(client):
    response = client.get("/api/v1/country-codes/", params={"locale": "xx"})

    assert response.status_code == 400
    assert response.json()["type"] == "ValueError"


def test_sections(client):
    response = client.get("/api/v1/country-codes/sections", params={"region": "FR"})

    assert response.status_code == 200
    sections = response.json()["sections"]
    assert [section["key"] for section in sections] == ["current", "common", "all"]
    assert sections[0]["countries"][0]["code"] == "FR"
    assert sections[1]["countries"][0]["code"] == "US"


def test_select_filtered_row(client):
    response = client.post("/api/v1/country-codes/select", json={"search": "+33", "index": 0})

    assert response.status_code == 200
    assert response.json()["code"] == "FR"


def test_select_out_of_range(client):
    response = client.post("/api/v1/country-codes/select", json={"search": "+33", "index": 5})

    assert response.status_code == 400


def test_select_negative_index(client):
    response = client.post("/api/v1/country-codes/select", json={"index": -1})

    assert response.status_code == 422


def test_request_id_echoed(client):
    response = client.get("/api/v1/health/live", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"
    assert "X-Process-Time" in response.headers
