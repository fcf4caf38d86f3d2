from app.core.storage import get_storage
from tests.conftest import PNG_BYTES


def test_upload_stores_object_and_returns_public_url(admin_client, s3):
    response = admin_client.post("/upload", files={"file": ("My Photo.png", PNG_BYTES, "image/png")})
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["key"].startswith("images/")
    assert data["key"].endswith("-my-photo.png")
    assert data["filepath"].endswith(data["key"])
    assert s3.objects[data["key"]]["body"] == PNG_BYTES
    assert s3.objects[data["key"]]["content_type"] == "image/png"


def test_non_image_goes_to_files_folder(admin_client, s3):
    response = admin_client.post("/upload", files={"file": ("cv.pdf", b"%PDF-1.4", "application/pdf")})
    assert response.status_code == 201
    assert response.json()["data"]["key"].startswith("files/")


def test_upload_requires_admin(client, s3):
    response = client.post("/upload", files={"file": ("a.png", PNG_BYTES, "image/png")})
    assert response.status_code == 401
    assert s3.objects == {}


def test_upload_rejects_oversized_file(admin_client, s3):
    big = b"\x00" * (6 * 1024 * 1024)
    response = admin_client.post("/upload", files={"file": ("big.png", big, "image/png")})
    assert response.status_code == 400
    assert response.json()["error"] == "file_too_large"
    assert s3.objects == {}


def test_upload_without_file(admin_client):
    assert admin_client.post("/upload").status_code == 400


def test_upload_when_storage_not_configured(app, admin_client):
    del app.dependency_overrides[get_storage]
    response = admin_client.post("/upload", files={"file": ("a.png", PNG_BYTES, "image/png")})
    assert response.status_code == 501
    assert response.json()["error"] == "storage_not_configured"
