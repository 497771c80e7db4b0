# happy_index/routers/users.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from happy_index.db.session import get_db
from happy_index.services.user_service import create_user

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("")
def create_anonymous_user(db: Session = Depends(get_db)):
    """建立匿名使用者，只產生一個 ID"""
    try:
        user_id = create_user(db)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("❌ 创建用户失败")
        raise HTTPException(status_code=500, detail="创建用户失败")

    logger.info(f"✅ 新用户: user_id={user_id}")
    return {"userId": user_id, "message": "用户创建成功"}
