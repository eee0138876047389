# -*- coding: utf-8 -*-
"""
Async SQLAlchemy database setup for the FastAPI application.
"""
from pathlib import Path
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

from charity_events.config import config

connect_args = {}
if config.DATABASE_URL.startswith("sqlite"):
    # sqlite+aiosqlite:///./database/x.db: make sure the folder exists
    db_file = config.DATABASE_URL.split(":///", 1)[-1]
    if db_file and db_file != ":memory:":
        Path(db_file).parent.mkdir(parents=True, exist_ok=True)
    connect_args = {"timeout": 15}

engine = create_async_engine(
    config.DATABASE_URL,
    connect_args=connect_args,
    # pool_pre_ping=True: checks the connection is alive before handing it out
    pool_pre_ping=True,
    pool_recycle=3600,
)

SessionLocal = async_sessionmaker(
    bind=engine,
    autoflush=False,
    expire_on_commit=False,
)

Base = declarative_base()


async def get_db():
    """One session per request, always released back to the pool."""
    async with SessionLocal() as db:
        yield db


async def init_db():
    """Creates the tables if they don't exist."""
    # Models must be imported so that Base.metadata knows about them
    from charity_events.models import event, registration  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
