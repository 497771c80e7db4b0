# happy_index/routers/stats.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker

from happy_index.db.session import get_session_factory
from happy_index.services.stats_service import collect_stats

router = APIRouter()


@router.get("")
async def get_stats(session_factory: sessionmaker = Depends(get_session_factory)):
    # 個別查詢失敗不影響回應，永遠回 200
    return await collect_stats(session_factory)
