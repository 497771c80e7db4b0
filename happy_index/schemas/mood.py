from typing import Optional

from pydantic import BaseModel


class MoodCreateRequest(BaseModel):
    userId: Optional[str] = None
    score: Optional[int] = None
    text: Optional[str] = None
    isPublic: Optional[bool] = True   # 未帶時預設公開


class PrivacyUpdateRequest(BaseModel):
    userId: Optional[str] = None
    isPublic: Optional[bool] = None


class MoodSummaryOut(BaseModel):
    id: str
    score: int
    text: str
    created_at: Optional[str]
    like_count: int
    comment_count: int


class UserMoodOut(MoodSummaryOut):
    is_public: bool
