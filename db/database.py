import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from config import get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = build_engine(get_settings().database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = engine) -> bool:
    """Create the settings table if it does not exist yet.

    An unreachable store is logged and reported as False. The API keeps
    serving and individual requests fail with 500 until the store is back.
    """
    import models.settings  # noqa: F401  registers the table on Base.metadata

    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError:
        logger.exception("Database initialization error")
        return False
    logger.info("Database initialized successfully")
    return True
