# happy_index/services/social_service.py
import uuid
from typing import List, Dict, Any, Optional

from sqlalchemy.orm import Session

from happy_index.core.timezone import format_local_time
from happy_index.models.like import Like
from happy_index.models.comment import Comment


# ================= 按讚 =================

def find_like(db: Session, mood_id: str, user_id: str) -> Optional[Like]:
    return (
        db.query(Like)
        .filter(Like.mood_id == mood_id, Like.user_id == user_id)
        .first()
    )


def add_like(db: Session, mood_id: str, user_id: str) -> str:
    # 併發重複按讚會撞到 uq_like_mood_user，由呼叫端處理 IntegrityError
    like = Like(id=str(uuid.uuid4()), mood_id=mood_id, user_id=user_id)
    db.add(like)
    db.commit()
    return like.id


def remove_like(db: Session, mood_id: str, user_id: str) -> int:
    removed = (
        db.query(Like)
        .filter(Like.mood_id == mood_id, Like.user_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return removed


# ================= 留言 =================

def create_comment(db: Session, mood_id: str, user_id: str, content: str) -> str:
    comment = Comment(
        id=str(uuid.uuid4()),
        mood_id=mood_id,
        user_id=user_id,
        content=content
    )
    db.add(comment)
    db.commit()
    return comment.id


def list_comments(db: Session, mood_id: str) -> List[Dict[str, Any]]:
    """留言依時間由舊到新"""
    comments = (
        db.query(Comment)
        .filter(Comment.mood_id == mood_id)
        .order_by(Comment.created_at.asc())
        .all()
    )
    return [
        {
            "id": c.id,
            "content": c.content,
            "created_at": format_local_time(c.created_at)
        }
        for c in comments
    ]
