# happy_index/main.py - 心情社區 API
from __future__ import annotations

import logging
from typing import Optional, List

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from happy_index.core.config import settings
from happy_index.core.timezone import get_local_time, format_local_time
from happy_index.db.init_db import init_db
from happy_index.db.session import build_engine, create_session_factory, get_db
from happy_index.routers import moods, social, stats, users

logger = logging.getLogger(__name__)


def _parse_allowed(origins_str: str) -> List[str]:
    out: List[str] = []
    for s in (origins_str or "").split(","):
        s = s.strip()
        if s and s != "null":
            out.append(s)
    return out or ["*"]


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    建立 FastAPI app。

    每個 app 有自己的 engine / session factory，存在 app.state，
    路由透過 get_db 取得 session。
    """
    app = FastAPI(
        title="Happy Index Backend",
        version=settings.VERSION,
        description="心情社区 - 匿名心情记录、点赞、评论与统计"
    )

    engine = build_engine(database_url or settings.DATABASE_URL)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # CORS 設定
    allowed_origins = _parse_allowed(settings.ALLOWED_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials="*" not in allowed_origins,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
        max_age=86400,
    )

    @app.middleware("http")
    async def catch_unexpected_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"❌ Request error: {request.method} {request.url.path}")
            return JSONResponse({"error": "服务器内部错误"}, status_code=500)

    # ================= 錯誤格式統一為 {"error": ...} =================

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"⚠️ 参数错误: {request.url.path} {exc.errors()}")
        return JSONResponse({"error": "缺少必要参数"}, status_code=400)

    # ================= 生命週期 =================

    @app.on_event("startup")
    def on_startup():
        init_db(engine)

    @app.on_event("shutdown")
    def on_shutdown():
        logger.info("正在关闭服务器...")
        engine.dispose()
        logger.info("✅ 数据库连接已关闭")

    # ================= 路由 =================

    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(moods.router, prefix="/api/moods", tags=["moods"])
    app.include_router(social.router, prefix="/api/moods", tags=["social"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])

    @app.get("/api/health")
    def health(db: Session = Depends(get_db)):
        try:
            db.execute(text("select 1"))
            database_ok = True
        except SQLAlchemyError as e:
            logger.warning(f"⚠️ DB not ready: {e}")
            database_ok = False

        return {
            "ok": database_ok,
            "time": format_local_time(get_local_time()),
            "version": settings.VERSION,
            "database": database_ok
        }

    if settings.STATIC_DIR:
        # 放在最後，API 路由優先
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
        logger.info(f"📁 静态文件目录: {settings.STATIC_DIR}")
    else:
        @app.get("/")
        def root():
            return {
                "service": "Happy Index API",
                "version": settings.VERSION,
                "status": "running",
                "docs": "/docs",
                "health": "/api/health",
                "timestamp": format_local_time(get_local_time())
            }

    return app


app = create_app()


def run():
    import uvicorn

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    logger.info(f"🚀 服务器运行在 http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
