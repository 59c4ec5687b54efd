import pytest
from fastapi.testclient import TestClient

from spaserve.config import load_config
from spaserve.main import create_app

SITE_FILES = {
    "index.html": b"<html>A</html>",
    "style.css": b"body { color: #333; }\n",
    "assets/app.js": b"console.log('app');\n",
}

ENV_VARS = ("HOST", "APP_PORT", "STATIC_ROOT", "FALLBACK_DOCUMENT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so anything load_dotenv writes is removed on teardown
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def site(tmp_path):
    """A build/web tree like a Flutter web build."""
    root = tmp_path / "build" / "web"
    for name, content in SITE_FILES.items():
        (root / name).parent.mkdir(parents=True, exist_ok=True)
        (root / name).write_bytes(content)
    return root


@pytest.fixture
def site_files():
    """Contents of the files written by the site fixture, keyed by relative path."""
    return dict(SITE_FILES)


@pytest.fixture
def config(site):
    return load_config(static_root=str(site))


@pytest.fixture
def client(config):
    with TestClient(create_app(config)) as c:
        yield c
