import pytest
from fastapi.testclient import TestClient

from main import create_app
from mangazen.config import Settings

UPSTREAM_HOST = "upstream.test"
UPSTREAM_URL = f"https://{UPSTREAM_HOST}"


@pytest.fixture
def static_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html>mangazen frontend</html>")
    (public / "app.js").write_text("console.log('reader');")
    return public


@pytest.fixture
def client(static_dir):
    """Test client with the lifespan running, so the upstream HTTP client is open."""
    app = create_app(Settings(upstream_url=UPSTREAM_URL, static_dir=str(static_dir)))
    with TestClient(app) as test_client:
        yield test_client
