import os

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from mentor.config import MENTOR_CONFIG

DATABASE_URL = os.environ.get("CAMPUS_DASHBOARD_DB_URL", MENTOR_CONFIG["db_url"])


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across the threadpool; other drivers reject this flag.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(DATABASE_URL, connect_args=_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    pass


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
