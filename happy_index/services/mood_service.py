# happy_index/services/mood_service.py
"""
心情記錄的查詢層

動態列表（公開 / 個人）都會附上按讚數與留言數，
使用 LEFT JOIN + COUNT(DISTINCT) 讓沒有互動的心情也會出現。
"""
import uuid
from typing import List, Dict, Any

from sqlalchemy import func, distinct
from sqlalchemy.orm import Session

from happy_index.core.timezone import format_local_time
from happy_index.models.mood import Mood
from happy_index.models.like import Like
from happy_index.models.comment import Comment


def create_mood(db: Session, user_id: str, score: int, text: str, is_public: bool = True) -> str:
    mood = Mood(
        id=str(uuid.uuid4()),
        user_id=user_id,
        score=score,
        text=text,
        is_public=is_public
    )
    db.add(mood)
    db.commit()
    return mood.id


def _feed_query(db: Session):
    return (
        db.query(
            Mood.id,
            Mood.score,
            Mood.text,
            Mood.is_public,
            Mood.created_at,
            func.count(distinct(Like.id)).label("like_count"),
            func.count(distinct(Comment.id)).label("comment_count"),
        )
        .outerjoin(Like, Like.mood_id == Mood.id)
        .outerjoin(Comment, Comment.mood_id == Mood.id)
    )


def _feed_row(row, include_visibility: bool) -> Dict[str, Any]:
    item = {
        "id": row.id,
        "score": row.score,
        "text": row.text,
        "created_at": format_local_time(row.created_at),
        "like_count": row.like_count,
        "comment_count": row.comment_count,
    }
    if include_visibility:
        item["is_public"] = bool(row.is_public)
    return item


def list_public_moods(db: Session, page: int, limit: int) -> List[Dict[str, Any]]:
    """公開動態，新到舊分頁"""
    offset = (page - 1) * limit
    rows = (
        _feed_query(db)
        .filter(Mood.is_public == True)  # noqa: E712
        .group_by(Mood.id)
        .order_by(Mood.created_at.desc())
        .limit(limit)
        .offset(offset)
        .all()
    )
    return [_feed_row(r, include_visibility=False) for r in rows]


def list_user_moods(db: Session, user_id: str) -> List[Dict[str, Any]]:
    """使用者自己的全部心情（含私密），不分頁"""
    rows = (
        _feed_query(db)
        .filter(Mood.user_id == user_id)
        .group_by(Mood.id)
        .order_by(Mood.created_at.desc())
        .all()
    )
    return [_feed_row(r, include_visibility=True) for r in rows]


def update_privacy(db: Session, mood_id: str, user_id: str, is_public: bool) -> int:
    """只更新屬於該使用者的心情，回傳受影響筆數"""
    changed = (
        db.query(Mood)
        .filter(Mood.id == mood_id, Mood.user_id == user_id)
        .update({Mood.is_public: is_public}, synchronize_session=False)
    )
    db.commit()
    return changed


def mood_exists(db: Session, mood_id: str) -> bool:
    return db.query(Mood.id).filter(Mood.id == mood_id).first() is not None
