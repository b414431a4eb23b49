import json
from os import environ
from typing import Literal

import boto3
from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy.engine import URL

from core.dates import supported_locales

_cached_database_url: str | None = None


def _resolve_database_url() -> str:
    """Build the SQLAlchemy URL from env vars or Secrets Manager, with caching."""
    global _cached_database_url
    if _cached_database_url is not None:
        return _cached_database_url

    # Explicit URL wins (local dev, tests)
    direct = environ.get("DATABASE_URL", "")
    if direct:
        _cached_database_url = direct
        return direct

    creds = {
        "host": environ.get("DB_HOST", "localhost"),
        "port": environ.get("DB_PORT", "5432"),
        "dbname": environ.get("DB_NAME", "planner"),
        "username": environ.get("DB_USER", "planner"),
        "password": environ.get("DB_PASSWORD", "localdev"),
    }

    # Deployed: credentials live in Secrets Manager
    arn = environ.get("DB_SECRET_ARN", "")
    if arn:
        client = boto3.client("secretsmanager", region_name=environ.get("AWS_REGION", "us-east-1"))
        secret = json.loads(client.get_secret_value(SecretId=arn)["SecretString"])
        creds.update({k: str(v) for k, v in secret.items() if k in creds})

    url = URL.create(
        "postgresql+psycopg",
        username=creds["username"],
        password=creds["password"],
        host=creds["host"],
        port=int(creds["port"]),
        database=creds["dbname"],
    )
    _cached_database_url = url.render_as_string(hide_password=False)
    return _cached_database_url


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_base_url: str
    web_base_url: str
    port: int
    aws_region: str
    database_url: str
    mail_transport: Literal["ses", "dev"] = "dev"
    ses_endpoint: str | None = None
    mail_sender_name: str
    mail_sender_address: str
    date_locale: str = "pt-br"
    environment: str

    @field_validator("date_locale")
    @classmethod
    def known_locale(cls, value: str) -> str:
        value = value.lower().replace("_", "-")
        if value not in supported_locales():
            raise ValueError(f"date_locale must be one of {supported_locales()}")
        return value


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config, _cached_database_url
    _cached_config = None
    _cached_database_url = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        api_base_url=environ.get("API_BASE_URL", "http://localhost:3333").rstrip("/"),
        web_base_url=environ.get("WEB_BASE_URL", "http://localhost:3000").rstrip("/"),
        port=int(environ.get("PORT", "3333")),
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        database_url=_resolve_database_url(),
        mail_transport=environ.get("MAIL_TRANSPORT", "dev"),
        ses_endpoint=environ.get("SES_ENDPOINT"),
        mail_sender_name=environ.get("MAIL_SENDER_NAME", "Equipe plann.er"),
        mail_sender_address=environ.get("MAIL_SENDER_ADDRESS", "oi@plann.er"),
        date_locale=environ.get("DATE_LOCALE", "pt-br"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
