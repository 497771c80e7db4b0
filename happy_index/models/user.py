# happy_index/models/user.py
from sqlalchemy import Column, String, DateTime

from happy_index.core.timezone import utc_now
from happy_index.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
