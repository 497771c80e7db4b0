# happy_index/models/comment.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey

from happy_index.core.timezone import utc_now
from happy_index.db.base import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(String(36), primary_key=True)
    mood_id = Column(String(36), ForeignKey("moods.id"), index=True)
    user_id = Column(String(36), ForeignKey("users.id"))
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
