"""Endpoint configuration resolved once per invocation."""

from pathlib import Path
from typing import Optional

import click
from pydantic import BaseModel, ConfigDict, Field, field_validator

APP_NAME = "graphql"
SCHEMA_FILE = "schema.json"
QUERIES_DIR = "queries"
TEMPLATES_DIR = "templates"


def default_home() -> Path:
    """Return the per-user config directory, e.g. ~/.config/graphql."""
    return Path(click.get_app_dir(APP_NAME))


def normalize_host(host: str) -> str:
    """Prefix https:// when the host carries no scheme."""
    host = host.strip()
    if "://" not in host:
        return f"https://{host}"
    return host


class Config(BaseModel):
    """Immutable endpoint and storage configuration.

    Example:
        config = Config(host="api.example.com/graphql", bearer="token")
        config.endpoint  # "https://api.example.com/graphql"
    """

    model_config = ConfigDict(frozen=True)

    host: str
    bearer: Optional[str] = None
    home: Path = Field(default_factory=default_home)

    @field_validator("host")
    @classmethod
    def _check_host(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("host must not be empty")
        return normalize_host(value)

    @field_validator("bearer")
    @classmethod
    def _blank_bearer_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("home", mode="before")
    @classmethod
    def _default_home(cls, value):
        if value is None or value == "":
            return default_home()
        return Path(value).expanduser()

    @property
    def endpoint(self) -> str:
        return self.host

    @property
    def schema_path(self) -> Path:
        return self.home / SCHEMA_FILE

    @property
    def queries_dir(self) -> Path:
        return self.home / QUERIES_DIR

    @property
    def templates_dir(self) -> Path:
        return self.home / TEMPLATES_DIR
