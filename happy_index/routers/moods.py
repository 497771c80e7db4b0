# happy_index/routers/moods.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from happy_index.core.config import settings
from happy_index.db.session import get_db
from happy_index.schemas.mood import (
    MoodCreateRequest,
    PrivacyUpdateRequest,
    MoodSummaryOut,
    UserMoodOut,
)
from happy_index.services import mood_service

logger = logging.getLogger(__name__)
router = APIRouter()


# SQLite INTEGER 上限
MAX_SQL_INT = 2 ** 63 - 1


def _positive_int(raw: Optional[str], default: int) -> int:
    """解析分頁參數，無法解析或小於 1 時回到預設值，過大時截到 MAX_SQL_INT"""
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    if value < 1:
        return default
    return min(value, MAX_SQL_INT)


# ================= 提交心情 =================

@router.post("")
def submit_mood(body: MoodCreateRequest, db: Session = Depends(get_db)):
    if not body.userId or body.score is None or not body.text:
        raise HTTPException(status_code=400, detail="缺少必要参数")

    # null 與未帶都視為公開
    is_public = True if body.isPublic is None else body.isPublic

    try:
        mood_id = mood_service.create_mood(
            db,
            user_id=body.userId,
            score=body.score,
            text=body.text,
            is_public=is_public
        )
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"❌ 保存心情记录失败: user_id={body.userId}")
        raise HTTPException(status_code=500, detail="保存心情记录失败")

    logger.info(f"✅ 新心情: mood_id={mood_id}, user_id={body.userId}, public={is_public}")
    return {"moodId": mood_id, "message": "心情记录保存成功"}


# ================= 動態列表 =================

@router.get("/public", response_model=List[MoodSummaryOut])
def public_feed(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db)
):
    page_no = _positive_int(page, 1)
    page_size = _positive_int(limit, settings.DEFAULT_PAGE_SIZE)

    # offset 超出資料庫整數範圍時必然沒有資料
    if (page_no - 1) * page_size > MAX_SQL_INT:
        return []

    try:
        return mood_service.list_public_moods(db, page=page_no, limit=page_size)
    except SQLAlchemyError:
        logger.exception("❌ 获取心情记录失败")
        raise HTTPException(status_code=500, detail="获取心情记录失败")


@router.get("/user/{user_id}", response_model=List[UserMoodOut])
def user_feed(user_id: str, db: Session = Depends(get_db)):
    try:
        return mood_service.list_user_moods(db, user_id)
    except SQLAlchemyError:
        logger.exception(f"❌ 获取用户心情记录失败: user_id={user_id}")
        raise HTTPException(status_code=500, detail="获取用户心情记录失败")


# ================= 隱私設定 =================

@router.put("/{mood_id}/privacy")
def update_privacy(mood_id: str, body: PrivacyUpdateRequest, db: Session = Depends(get_db)):
    if not body.userId or body.isPublic is None:
        raise HTTPException(status_code=400, detail="缺少必要参数")

    try:
        changed = mood_service.update_privacy(db, mood_id, body.userId, body.isPublic)
        # 沒有更新到任何資料時，區分「不存在」與「不是本人」
        exists = changed > 0 or mood_service.mood_exists(db, mood_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"❌ 更新隐私设置失败: mood_id={mood_id}")
        raise HTTPException(status_code=500, detail="更新隐私设置失败")

    if not exists:
        raise HTTPException(status_code=404, detail="记录不存在")
    if changed == 0:
        logger.warning(f"🚫 非本人修改隐私: mood_id={mood_id}, user_id={body.userId}")
        raise HTTPException(status_code=403, detail="无权限修改该记录")

    logger.info(f"✅ 隐私更新: mood_id={mood_id}, public={body.isPublic}")
    return {"message": "隐私设置更新成功"}
