# happy_index/db/session.py
import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)


def process_database_url(url: str) -> str:
    """處理資料庫 URL"""
    if not url:
        logger.warning("[WARN] DATABASE_URL not set; using SQLite")
        return "sqlite:///./mood_community.db"

    # SQLAlchemy 不接受 postgres:// 前綴
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    return url


def build_engine(database_url: str) -> Engine:
    url = process_database_url(database_url)

    engine_kwargs = dict(pool_pre_ping=True)
    connect_args = {}

    if url.startswith("sqlite"):
        # 統計查詢會在 worker thread 中執行
        connect_args["check_same_thread"] = False
    elif url.startswith("postgresql"):
        engine_kwargs.update({
            "pool_size": 5,
            "max_overflow": 10,
            "pool_timeout": 30,
            "pool_recycle": 1800,
        })

    engine = create_engine(url, connect_args=connect_args, echo=False, **engine_kwargs)
    logger.info(f"✅ Database engine created: {url.split('://', 1)[0]}")
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_session_factory(request: Request) -> sessionmaker:
    """取得目前 app 的 session factory"""
    return request.app.state.session_factory


def get_db(request: Request) -> Iterator[Session]:
    db = get_session_factory(request)()
    try:
        yield db
    finally:
        db.close()
