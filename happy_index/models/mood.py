# happy_index/models/mood.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey

from happy_index.core.timezone import utc_now
from happy_index.db.base import Base


class Mood(Base):
    __tablename__ = "moods"

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(
        String(36),
        ForeignKey("users.id"),
        nullable=True,  # 舊資料允許 NULL，API 一律會帶
        index=True
    )

    score = Column(Integer, nullable=False)
    text = Column(Text, nullable=False)
    is_public = Column(Boolean, default=True, server_default="1", nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
