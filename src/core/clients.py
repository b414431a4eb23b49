"""Lazy-initialized service clients — reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3

from core.config import get_config
from core.db.session import get_session_factory
from core.db.store import SqlTripStore


@lru_cache(maxsize=1)
def get_ses_client() -> Any:
    config = get_config()
    return boto3.client("ses", region_name=config.aws_region, endpoint_url=config.ses_endpoint)


@lru_cache(maxsize=1)
def get_trip_store() -> SqlTripStore:
    return SqlTripStore(get_session_factory())
