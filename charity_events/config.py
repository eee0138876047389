# -*- coding: utf-8 -*-
"""
Application settings, read from environment variables (or a .env file).
"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent


def _async_database_url(url):
    # Hosting providers hand out sync URLs; the engine needs an async driver
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("mysql://"):
        return url.replace("mysql://", "mysql+aiomysql://", 1)
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return url


class Config:
    DATABASE_URL = _async_database_url(
        os.environ.get("DATABASE_URL", "sqlite+aiosqlite:///./database/charity_events.db")
    )
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
    PORT = int(os.environ.get("PORT", 3000))
    CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

    STATIC_DIR = PACKAGE_DIR / "static"
    UPLOAD_DIR = Path(os.environ.get("UPLOAD_DIR", str(PACKAGE_DIR / "static" / "img")))
    MAX_IMAGE_SIZE = int(os.environ.get("MAX_IMAGE_SIZE", 2 * 1024 * 1024))  # 2MB

    UPCOMING_LIMIT = int(os.environ.get("UPCOMING_LIMIT", 6))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.environ.get("LOG_FILE") or None


config = Config()
