"""Engine and session factory — reused across warm Lambda invocations."""

from functools import lru_cache

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.config import get_config


def build_engine(database_url: str) -> Engine:
    # Lambda containers serve one request at a time; keep the pool tiny.
    if database_url.startswith("sqlite"):
        return create_engine(database_url)
    return create_engine(database_url, pool_size=1, max_overflow=0, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return build_engine(get_config().database_url)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), expire_on_commit=False)
