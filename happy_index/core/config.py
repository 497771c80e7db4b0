# happy_index/core/config.py
import os

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(usecwd=True))


def normalize_log_level(value: str) -> str:
    """logging 只接受大寫等級名稱"""
    return (value or "INFO").strip().upper()


class Settings:
    # 資料庫,預設使用本地 SQLite 檔案
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mood_community.db")

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*")

    # 前端靜態檔案目錄,留空則不掛載
    STATIC_DIR = os.getenv("STATIC_DIR", "")

    LOG_LEVEL = normalize_log_level(os.getenv("LOG_LEVEL", "INFO"))
    TZ_OFFSET_HOURS = int(os.getenv("TZ_OFFSET_HOURS", "8"))
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))

    VERSION = "1.0.0"


settings = Settings()
