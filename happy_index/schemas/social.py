from typing import Optional

from pydantic import BaseModel


class LikeToggleRequest(BaseModel):
    userId: Optional[str] = None


class CommentCreateRequest(BaseModel):
    userId: Optional[str] = None
    content: Optional[str] = None


class CommentOut(BaseModel):
    id: str
    content: str
    created_at: Optional[str]
