"""Configuration management for the user table service."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

import yaml

from .models import UserRecord, parse_iso_date

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

_DATE_FIELDS = ("create_date", "password_changed_date", "last_access_date")


@dataclass(frozen=True)
class ServiceConfig:
    """Bind address and dataset location for the HTTP service."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    dataset_path: Optional[Path] = None

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "ServiceConfig":
        """Create a :class:`ServiceConfig` from ``USER_TABLE_*`` variables."""
        env = os.environ if environ is None else environ

        host = env.get("USER_TABLE_HOST", "").strip() or DEFAULT_HOST
        raw_port = env.get("USER_TABLE_PORT", "").strip()
        port = parse_port(raw_port) if raw_port else DEFAULT_PORT

        return ServiceConfig(
            host=host,
            port=port,
            dataset_path=resolve_dataset_path(env.get("USER_TABLE_DATASET")),
        )


def parse_port(value: str) -> int:
    """Parse a TCP port number, rejecting values outside 1-65535."""
    try:
        port = int(value)
    except ValueError as exc:
        raise ValueError(f"Invalid port '{value}': expected an integer") from exc
    if not 1 <= port <= 65535:
        raise ValueError(f"Invalid port {port}: must be between 1 and 65535")
    return port


def resolve_dataset_path(env_value: Optional[str]) -> Optional[Path]:
    """Resolve the path to an optional dataset override file."""
    if not env_value or not env_value.strip():
        return None
    return Path(env_value.strip()).expanduser().resolve(strict=False)


def _normalise_date(value: object, field: str) -> str:
    # PyYAML turns unquoted 2020-10-01 into datetime.date, timestamps into datetime
    if isinstance(value, datetime):
        raise ValueError(f"Field '{field}' must be a date without a time component")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        cleaned = value.strip()
        try:
            parse_iso_date(cleaned)
        except ValueError as exc:
            raise ValueError(f"Field '{field}': {exc}") from exc
        return cleaned
    raise ValueError(f"Field '{field}' must be a YYYY-MM-DD date")


def record_from_dict(data: Dict[str, object]) -> UserRecord:
    """Create a :class:`UserRecord` from raw dictionary data."""
    if not isinstance(data, dict):
        raise ValueError("Each user entry must be a mapping")

    required_fields = {"name", "mfa_enabled", *_DATE_FIELDS}
    missing = required_fields - data.keys()
    if missing:
        raise ValueError(f"Missing required user fields: {', '.join(sorted(missing))}")

    raw_name = data["name"]
    if not isinstance(raw_name, str):
        raise ValueError("User name must be a string")

    name = raw_name.strip()
    if not name:
        raise ValueError("User name must not be empty")

    mfa_enabled = data["mfa_enabled"]
    if not isinstance(mfa_enabled, bool):
        raise ValueError(f"Field 'mfa_enabled' for user '{name}' must be true or false")

    return UserRecord(
        name=name,
        create_date=_normalise_date(data["create_date"], "create_date"),
        password_changed_date=_normalise_date(data["password_changed_date"], "password_changed_date"),
        last_access_date=_normalise_date(data["last_access_date"], "last_access_date"),
        mfa_enabled=mfa_enabled,
    )


def load_dataset(config_path: Path) -> Tuple[UserRecord, ...]:
    """Load user records from a YAML file."""
    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Dataset file {config_path} is not valid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError("Dataset file must be a mapping with a 'users' key")

    users_raw = raw.get("users")
    if not users_raw:
        raise ValueError("Dataset file must define at least one user under the 'users' key")
    if not isinstance(users_raw, list):
        raise ValueError("The 'users' key must hold a list of user entries")

    return tuple(record_from_dict(item) for item in users_raw)


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ServiceConfig",
    "load_dataset",
    "parse_port",
    "record_from_dict",
    "resolve_dataset_path",
]
