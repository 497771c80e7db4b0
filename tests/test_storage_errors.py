# tests/test_storage_errors.py
"""
資料庫錯誤時各端點回 500 與各自的錯誤訊息
"""
from sqlalchemy.exc import OperationalError

from happy_index.routers import users as users_router
from happy_index.services import mood_service, social_service


def _raise_db_error(*args, **kwargs):
    raise OperationalError("SQL", {}, Exception("database is locked"))


def test_create_user_failure(client, monkeypatch):
    monkeypatch.setattr(users_router, "create_user", _raise_db_error)

    res = client.post("/api/users")
    assert res.status_code == 500
    assert res.json() == {"error": "创建用户失败"}


def test_submit_mood_failure(client, monkeypatch, user_id):
    monkeypatch.setattr(mood_service, "create_mood", _raise_db_error)

    res = client.post("/api/moods", json={"userId": user_id, "score": 5, "text": "x"})
    assert res.status_code == 500
    assert res.json() == {"error": "保存心情记录失败"}

    monkeypatch.undo()
    assert client.get(f"/api/moods/user/{user_id}").json() == []


def test_feed_failures(client, monkeypatch, user_id):
    monkeypatch.setattr(mood_service, "list_public_moods", _raise_db_error)
    monkeypatch.setattr(mood_service, "list_user_moods", _raise_db_error)

    res = client.get("/api/moods/public")
    assert res.status_code == 500
    assert res.json() == {"error": "获取心情记录失败"}

    res = client.get(f"/api/moods/user/{user_id}")
    assert res.status_code == 500
    assert res.json() == {"error": "获取用户心情记录失败"}


def test_like_lookup_failure(client, monkeypatch, user_id, post_mood):
    mood_id = post_mood(user_id)
    monkeypatch.setattr(social_service, "find_like", _raise_db_error)

    res = client.post(f"/api/moods/{mood_id}/like", json={"userId": user_id})
    assert res.status_code == 500
    assert res.json() == {"error": "检查点赞状态失败"}

    res = client.get(f"/api/moods/{mood_id}/like-status/{user_id}")
    assert res.status_code == 500
    assert res.json() == {"error": "检查点赞状态失败"}


def test_unlike_failure_keeps_like(client, monkeypatch, user_id, post_mood):
    mood_id = post_mood(user_id)
    client.post(f"/api/moods/{mood_id}/like", json={"userId": user_id})
    monkeypatch.setattr(social_service, "remove_like", _raise_db_error)

    res = client.post(f"/api/moods/{mood_id}/like", json={"userId": user_id})
    assert res.status_code == 500
    assert res.json() == {"error": "取消点赞失败"}

    monkeypatch.undo()
    assert client.get(f"/api/moods/{mood_id}/like-status/{user_id}").json() == {"liked": True}


def test_lost_like_race_hits_unique_constraint(client, monkeypatch, user_id, post_mood):
    mood_id = post_mood(user_id)
    client.post(f"/api/moods/{mood_id}/like", json={"userId": user_id})

    # 模擬另一個請求在查詢後先寫入：查詢看不到已存在的讚
    monkeypatch.setattr(social_service, "find_like", lambda db, m, u: None)

    res = client.post(f"/api/moods/{mood_id}/like", json={"userId": user_id})
    assert res.status_code == 500
    assert res.json() == {"error": "点赞失败"}

    monkeypatch.undo()
    assert client.get("/api/stats").json()["totalLikes"] == 1


def test_comment_failures(client, monkeypatch, user_id, post_mood):
    mood_id = post_mood(user_id)
    monkeypatch.setattr(social_service, "create_comment", _raise_db_error)
    monkeypatch.setattr(social_service, "list_comments", _raise_db_error)

    res = client.post(f"/api/moods/{mood_id}/comments", json={"userId": user_id, "content": "hi"})
    assert res.status_code == 500
    assert res.json() == {"error": "添加评论失败"}

    res = client.get(f"/api/moods/{mood_id}/comments")
    assert res.status_code == 500
    assert res.json() == {"error": "获取评论失败"}


def test_privacy_update_failure(client, monkeypatch, user_id, post_mood):
    mood_id = post_mood(user_id)
    monkeypatch.setattr(mood_service, "update_privacy", _raise_db_error)

    res = client.put(f"/api/moods/{mood_id}/privacy", json={"userId": user_id, "isPublic": False})
    assert res.status_code == 500
    assert res.json() == {"error": "更新隐私设置失败"}

    monkeypatch.undo()
    assert client.get(f"/api/moods/user/{user_id}").json()[0]["is_public"] is True


def test_unexpected_error_becomes_generic_500(client, monkeypatch, user_id, post_mood):
    mood_id = post_mood(user_id)

    def boom(db, mood_id):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(social_service, "list_comments", boom)

    res = client.get(f"/api/moods/{mood_id}/comments")
    assert res.status_code == 500
    assert res.json() == {"error": "服务器内部错误"}
