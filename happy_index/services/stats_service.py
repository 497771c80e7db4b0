# happy_index/services/stats_service.py
import asyncio
import logging
from typing import Any, Callable, Dict

from sqlalchemy import func
from sqlalchemy.orm import Session, sessionmaker

from happy_index.models.user import User
from happy_index.models.mood import Mood
from happy_index.models.like import Like
from happy_index.models.comment import Comment

logger = logging.getLogger(__name__)


def _avg_public_score(db: Session):
    value = db.query(func.avg(Mood.score)).filter(Mood.is_public == True).scalar()  # noqa: E712
    return float(value) if value is not None else None


STAT_QUERIES: Dict[str, Callable[[Session], Any]] = {
    "totalMoods": lambda db: db.query(func.count(Mood.id)).scalar(),
    "publicMoods": lambda db: db.query(func.count(Mood.id)).filter(Mood.is_public == True).scalar(),  # noqa: E712
    "totalUsers": lambda db: db.query(func.count(User.id)).scalar(),
    "avgScore": _avg_public_score,
    "totalLikes": lambda db: db.query(func.count(Like.id)).scalar(),
    "totalComments": lambda db: db.query(func.count(Comment.id)).scalar(),
}


def _run_one(session_factory: sessionmaker, query: Callable[[Session], Any]) -> Any:
    # 每個查詢各自一個 session，session 不能跨 thread 共用
    db = session_factory()
    try:
        return query(db)
    finally:
        db.close()


async def collect_stats(session_factory: sessionmaker) -> Dict[str, Any]:
    """
    同時執行所有統計查詢，全部完成後合併。
    失敗的查詢只記錄 log，結果中省略該 key。
    """
    keys = list(STAT_QUERIES)
    tasks = [asyncio.to_thread(_run_one, session_factory, STAT_QUERIES[k]) for k in keys]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    stats: Dict[str, Any] = {}
    for key, result in zip(keys, results):
        if isinstance(result, Exception):
            logger.warning(f"⚠️ 統計查詢失敗 {key}: {result}")
            continue
        stats[key] = result

    logger.info(f"📊 [Stats] {len(stats)}/{len(keys)} 項成功")
    return stats
