# happy_index/core/timezone.py
from datetime import datetime, timezone, timedelta
from typing import Optional

from happy_index.core.config import settings

# 顯示用時區,預設 UTC+8
LOCAL_TZ = timezone(timedelta(hours=settings.TZ_OFFSET_HOURS))


def utc_now() -> datetime:
    """寫入資料庫用的 UTC 時間（帶時區資訊）"""
    return datetime.now(timezone.utc)


def get_local_time() -> datetime:
    return datetime.now(LOCAL_TZ)


def to_local(dt: Optional[datetime]) -> Optional[datetime]:
    """將 UTC 時間轉換為本地時間"""
    if dt is None:
        return None

    # SQLite 讀回來沒有時區資訊，視為 UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(LOCAL_TZ)


def format_local_time(dt: Optional[datetime]) -> Optional[str]:
    """格式化為 ISO 字串"""
    if dt is None:
        return None
    return to_local(dt).isoformat()
