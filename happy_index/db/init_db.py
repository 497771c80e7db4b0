# happy_index/db/init_db.py
import logging

from sqlalchemy.engine import Engine

from happy_index.db.base import Base
import happy_index.models  # noqa: F401  註冊所有資料表

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """建立資料表（已存在則略過）"""
    Base.metadata.create_all(bind=engine)
    logger.info(f"✅ 資料表初始化完成: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    # 手動建表: python -m happy_index.db.init_db
    from happy_index.core.config import settings
    from happy_index.db.session import build_engine

    logging.basicConfig(level=settings.LOG_LEVEL)
    _engine = build_engine(settings.DATABASE_URL)
    try:
        init_db(_engine)
    finally:
        _engine.dispose()
