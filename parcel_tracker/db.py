# parcel_tracker/db.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import settings

Base = declarative_base()


def make_engine(url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # sessions are handed out to whichever thread serves the request
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


engine = make_engine(settings.database_url, echo=settings.db_echo)
SessionLocal = make_session_factory(engine)


def init_db(bind: Engine | None = None):
    # import models so classes register to Base
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
