"""Engine and per-request sessions for the ledger and profile stores"""

from typing import Any, Dict
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from budget_planner.config import Settings, settings


def engine_options(config: Settings) -> Dict[str, Any]:
    """Keyword arguments for create_engine; pool sizing only applies to server databases"""
    if make_url(config.database_url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_pre_ping": True,
        "pool_size": config.db_pool_size,
        "max_overflow": config.db_max_overflow,
        "pool_recycle": config.db_pool_recycle_seconds,
    }


engine = create_engine(settings.database_url, **engine_options(settings))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Yield a session for one request and always close it"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
