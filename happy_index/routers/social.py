# happy_index/routers/social.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from happy_index.db.session import get_db
from happy_index.schemas.social import LikeToggleRequest, CommentCreateRequest, CommentOut
from happy_index.services import social_service

logger = logging.getLogger(__name__)
router = APIRouter()


# ================= 按讚 =================

@router.post("/{mood_id}/like")
def toggle_like(mood_id: str, body: LikeToggleRequest, db: Session = Depends(get_db)):
    """已按讚就取消，沒按過就新增"""
    if not body.userId:
        raise HTTPException(status_code=400, detail="缺少用户ID")

    try:
        existing = social_service.find_like(db, mood_id, body.userId)
    except SQLAlchemyError:
        logger.exception(f"❌ 检查点赞状态失败: mood_id={mood_id}")
        raise HTTPException(status_code=500, detail="检查点赞状态失败")

    if existing:
        try:
            social_service.remove_like(db, mood_id, body.userId)
        except SQLAlchemyError:
            db.rollback()
            logger.exception(f"❌ 取消点赞失败: mood_id={mood_id}")
            raise HTTPException(status_code=500, detail="取消点赞失败")
        logger.info(f"💔 取消点赞: mood_id={mood_id}, user_id={body.userId}")
        return {"liked": False, "message": "取消点赞成功"}

    try:
        social_service.add_like(db, mood_id, body.userId)
    except SQLAlchemyError:
        # 包含併發重複按讚造成的 IntegrityError
        db.rollback()
        logger.exception(f"❌ 点赞失败: mood_id={mood_id}")
        raise HTTPException(status_code=500, detail="点赞失败")

    logger.info(f"❤️ 点赞: mood_id={mood_id}, user_id={body.userId}")
    return {"liked": True, "message": "点赞成功"}


@router.get("/{mood_id}/like-status/{user_id}")
def like_status(mood_id: str, user_id: str, db: Session = Depends(get_db)):
    try:
        existing = social_service.find_like(db, mood_id, user_id)
    except SQLAlchemyError:
        logger.exception(f"❌ 检查点赞状态失败: mood_id={mood_id}")
        raise HTTPException(status_code=500, detail="检查点赞状态失败")
    return {"liked": existing is not None}


# ================= 留言 =================

@router.post("/{mood_id}/comments")
def add_comment(mood_id: str, body: CommentCreateRequest, db: Session = Depends(get_db)):
    if not body.userId or not body.content:
        raise HTTPException(status_code=400, detail="缺少必要参数")

    try:
        comment_id = social_service.create_comment(db, mood_id, body.userId, body.content)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"❌ 添加评论失败: mood_id={mood_id}")
        raise HTTPException(status_code=500, detail="添加评论失败")

    logger.info(f"💬 新评论: comment_id={comment_id}, mood_id={mood_id}")
    return {"commentId": comment_id, "message": "评论添加成功"}


@router.get("/{mood_id}/comments", response_model=List[CommentOut])
def get_comments(mood_id: str, db: Session = Depends(get_db)):
    try:
        return social_service.list_comments(db, mood_id)
    except SQLAlchemyError:
        logger.exception(f"❌ 获取评论失败: mood_id={mood_id}")
        raise HTTPException(status_code=500, detail="获取评论失败")
