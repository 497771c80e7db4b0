# happy_index/models/like.py
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint

from happy_index.core.timezone import utc_now
from happy_index.db.base import Base


class Like(Base):
    __tablename__ = "likes"
    # 同一使用者對同一則心情只能有一個讚
    __table_args__ = (
        UniqueConstraint("mood_id", "user_id", name="uq_like_mood_user"),
    )

    id = Column(String(36), primary_key=True)
    mood_id = Column(String(36), ForeignKey("moods.id"), index=True)
    user_id = Column(String(36), ForeignKey("users.id"))
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
