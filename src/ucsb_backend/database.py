import logging
from functools import lru_cache
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, Session

from ucsb_backend.settings import settings

logger = logging.getLogger(__name__)

_postgres_options = {
    "pool_pre_ping": True,
    "pool_timeout": 30,
    "pool_recycle": 300
}

@lru_cache()
def get_engine() -> Engine:
    """Create the process wide engine on first use."""
    url = settings.database_url

    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        **_postgres_options
    )

@lru_cache()
def get_session_factory() -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())

def get_db() -> Generator[Session, None, None]:

    db = get_session_factory()()

    try:
        yield db
    except OperationalError:
        logger.error("Database connection failed")
        db.rollback()
        raise
    finally:
        db.close()

def create_tables(engine: Engine | None = None):
    from ucsb_backend.model import Base

    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
