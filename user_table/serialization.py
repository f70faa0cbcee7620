"""JSON encoding of user records for the HTTP API."""

from __future__ import annotations

from typing import Iterable, List

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic_core import PydanticSerializationError

from .models import UserRecord, parse_iso_date


class SerializationError(Exception):
    """Raised when user records cannot be converted to or from JSON."""


class UserView(BaseModel):
    """Wire representation of a :class:`UserRecord`."""

    model_config = ConfigDict(extra="forbid", strict=True)

    name: str
    create_date: str
    password_changed_date: str
    last_access_date: str
    mfa_enabled: bool


_USER_LIST = TypeAdapter(List[UserView])


def _record_to_view(record: UserRecord) -> UserView:
    return UserView(
        name=record.name,
        create_date=record.create_date,
        password_changed_date=record.password_changed_date,
        last_access_date=record.last_access_date,
        mfa_enabled=record.mfa_enabled,
    )


def encode_users(records: Iterable[UserRecord]) -> bytes:
    """Serialise ``records`` to a complete JSON array.

    The whole body is produced in memory so callers can choose the response
    status only after encoding has succeeded.
    """

    try:
        views = [_record_to_view(record) for record in records]
        return _USER_LIST.dump_json(views)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise SerializationError(f"Failed to encode users: {exc}") from exc


def decode_users(payload: bytes | str) -> List[UserRecord]:
    """Parse a JSON array produced by :func:`encode_users`."""

    try:
        views = _USER_LIST.validate_json(payload)
        for view in views:
            for value in (view.create_date, view.password_changed_date, view.last_access_date):
                parse_iso_date(value)
    except ValueError as exc:
        raise SerializationError(f"Failed to decode users: {exc}") from exc

    return [
        UserRecord(
            name=view.name,
            create_date=view.create_date,
            password_changed_date=view.password_changed_date,
            last_access_date=view.last_access_date,
            mfa_enabled=view.mfa_enabled,
        )
        for view in views
    ]


__all__ = ["SerializationError", "UserView", "decode_users", "encode_users"]
