"""Domain models for the user table service."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date."""

    if not _ISO_DATE.match(value):
        raise ValueError(f"Invalid date '{value}': expected YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"Invalid date '{value}': {exc}") from exc


def _days_since(value: str, today: date) -> int:
    return (today - parse_iso_date(value)).days


@dataclass(frozen=True)
class UserRecord:
    """Account metadata for a single user as shown in the user table."""

    name: str
    create_date: str
    password_changed_date: str
    last_access_date: str
    mfa_enabled: bool

    def days_since_password_change(self, today: date | None = None) -> int:
        return _days_since(self.password_changed_date, today or date.today())

    def days_since_last_access(self, today: date | None = None) -> int:
        return _days_since(self.last_access_date, today or date.today())


__all__ = ["UserRecord", "parse_iso_date"]
