# tests/test_app.py
import logging

from fastapi.testclient import TestClient

from happy_index.core.config import settings, normalize_log_level
from happy_index.main import create_app


def _db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'app.db'}"


def test_root_banner_without_static_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "STATIC_DIR", "")

    with TestClient(create_app(database_url=_db_url(tmp_path))) as client:
        res = client.get("/")
        assert res.status_code == 200
        body = res.json()
        assert body["status"] == "running"
        assert body["health"] == "/api/health"


def test_static_dir_served_at_root(tmp_path, monkeypatch):
    static_dir = tmp_path / "public"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>心情社区</h1>", encoding="utf-8")
    monkeypatch.setattr(settings, "STATIC_DIR", str(static_dir))

    with TestClient(create_app(database_url=_db_url(tmp_path))) as client:
        res = client.get("/")
        assert res.status_code == 200
        assert "心情社区" in res.text

        # API 路由仍優先
        assert client.post("/api/users").status_code == 200


def test_shutdown_disposes_engine(tmp_path, monkeypatch):
    app = create_app(database_url=_db_url(tmp_path))
    engine = app.state.engine
    original_dispose = engine.dispose
    calls = []

    def spy_dispose(*args, **kwargs):
        calls.append(True)
        return original_dispose(*args, **kwargs)

    monkeypatch.setattr(engine, "dispose", spy_dispose)

    with TestClient(app) as client:
        client.get("/api/health")
        assert calls == []

    assert calls == [True]


def test_huge_page_returns_empty_list(client, user_id, post_mood):
    post_mood(user_id)

    res = client.get("/api/moods/public", params={"page": str(10 ** 30)})
    assert res.status_code == 200
    assert res.json() == []

    res = client.get("/api/moods/public", params={"limit": str(10 ** 30)})
    assert res.status_code == 200
    assert len(res.json()) == 1


def test_log_level_is_normalized():
    assert normalize_log_level("info") == "INFO"
    assert normalize_log_level(" debug ") == "DEBUG"
    assert normalize_log_level("") == "INFO"
    assert isinstance(logging.getLevelName(normalize_log_level("warning")), int)
    assert settings.LOG_LEVEL == settings.LOG_LEVEL.upper()
