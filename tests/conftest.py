import pytest
from fastapi.testclient import TestClient

from happy_index.main import create_app


@pytest.fixture
def app(tmp_path):
    return create_app(database_url=f"sqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def client(app):
    # with 區塊會觸發 startup / shutdown
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_id(client):
    return client.post("/api/users").json()["userId"]


@pytest.fixture
def post_mood(client):
    def _post(user_id, score=7, text="今天不错", **extra):
        payload = {"userId": user_id, "score": score, "text": text}
        payload.update(extra)
        res = client.post("/api/moods", json=payload)
        assert res.status_code == 200, res.text
        return res.json()["moodId"]
    return _post
