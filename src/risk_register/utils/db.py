from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import scoped_session, sessionmaker

from risk_register.config import AppConfig
from risk_register.models import Base


def build_engine(config: AppConfig) -> Engine:
    connect_args = {}
    if config.database_url.startswith("sqlite"):
        # Flask's dev server handles requests on worker threads.
        connect_args["check_same_thread"] = False
    return create_engine(config.database_url, echo=config.debug, connect_args=connect_args, future=True)


def init_db(config: AppConfig):
    """Create the storage tables and return a thread-local session registry."""
    engine = build_engine(config)
    Base.metadata.create_all(engine)
    return scoped_session(sessionmaker(bind=engine, autoflush=False, expire_on_commit=False))


@contextmanager
def session_scope(Session) -> Iterator:
    session = Session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
