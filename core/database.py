from datetime import datetime, timezone
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from core.config import settings


def build_engine(url: str, **engine_kwargs) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # the session is used from FastAPI's threadpool
        connect_args["check_same_thread"] = False
    new_engine = create_engine(url, echo=False, future=True, connect_args=connect_args, **engine_kwargs)
    if url.startswith("sqlite"):
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()


# dependency
def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# largest value an INTEGER primary key can hold in SQLite and PostgreSQL BIGINT
MAX_ROW_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    """False for ids no row can have; the driver refuses to bind them."""
    return -MAX_ROW_ID - 1 <= value <= MAX_ROW_ID
