from app.core.database import CONTENT_VERSIONS


def test_get_content_seeds_defaults(client, db):
    response = client.get("/content")
    assert response.status_code == 200
    assert response.headers["X-Content-Source"] == "seeded"
    data = response.json()["data"]
    assert data["name"] == "John Doe"
    assert "graphicDesigns" in data
    assert db[CONTENT_VERSIONS].count_documents({}) == 1

    assert client.get("/content").headers["X-Content-Source"] == "stored"


def test_put_content_merges_partial_update(admin_client):
    before = admin_client.get("/content").json()["data"]
    response = admin_client.put(
        "/content",
        json={"skills": [{"name": "Rust", "level": 120}], "socialLinks": [{"name": "GitHub", "url": "https://github.com/x"}]},
    )
    assert response.status_code == 200

    after = admin_client.get("/content").json()["data"]
    assert after["skills"] == [{"name": "Rust", "level": 100}]
    assert after["socialLinks"] == [{"name": "GitHub", "url": "https://github.com/x"}]
    assert after["tagline"] == before["tagline"]
    assert after["projects"] == before["projects"]


def test_put_content_rejects_invalid_payload(admin_client, db):
    admin_client.get("/content")
    response = admin_client.put("/content", json={"skills": [{"level": 10}]})
    assert response.status_code == 400
    assert db[CONTENT_VERSIONS].count_documents({}) == 1


def test_put_content_rejects_non_finite_skill_level(admin_client, db):
    admin_client.get("/content")
    response = admin_client.put(
        "/content",
        content=b'{"skills": [{"name": "A", "level": 1e400}]}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"
    assert db[CONTENT_VERSIONS].count_documents({}) == 1


def test_get_content_fails_open(broken_client):
    response = broken_client.get("/content")
    assert response.status_code == 200
    assert response.headers["X-Content-Source"] == "fallback"
    assert response.json()["data"]["name"] == "John Doe"


def test_put_content_surfaces_backend_failure(broken_client):
    broken_client.post("/auth/login", json={"username": "admin", "password": "password"})
    response = broken_client.put("/content", json={"tagline": "x"})
    assert response.status_code == 500
    assert response.json()["error"] == "update_failed"
