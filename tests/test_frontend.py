from fastapi.testclient import TestClient

from main import create_app
from mangazen.config import Settings


def test_root_serves_index(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "mangazen frontend" in response.text


def test_unknown_path_falls_back_to_index(client):
    response = client.get("/manga/some-id/read")

    assert response.status_code == 200
    assert "mangazen frontend" in response.text


def test_unknown_api_path_falls_back_to_index(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 200
    assert "mangazen frontend" in response.text


def test_existing_static_file_is_served(client):
    response = client.get("/app.js")

    assert response.status_code == 200
    assert response.text == "console.log('reader');"


def test_files_outside_static_dir_are_not_served(client, static_dir):
    (static_dir.parent / "secret.txt").write_text("top secret")

    response = client.get("/..%2Fsecret.txt")

    assert "top secret" not in response.text


def test_missing_frontend_is_404(tmp_path):
    app = create_app(Settings(static_dir=str(tmp_path)))

    with TestClient(app) as client:
        response = client.get("/anything")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_null_byte_path_falls_back_to_index(client):
    response = client.get("/%00")

    assert response.status_code == 200
    assert "mangazen frontend" in response.text


def test_wrong_method_renders_json_error(client):
    response = client.post("/api/health")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}
