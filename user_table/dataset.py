"""The fixed set of user records served by the API."""

from __future__ import annotations

from typing import Iterable, Tuple

from .models import UserRecord

REFERENCE_USERS: Tuple[UserRecord, ...] = (
    UserRecord(
        name="Foo Bar1",
        create_date="2020-10-01",
        password_changed_date="2021-10-01",
        last_access_date="2025-01-04",
        mfa_enabled=True,
    ),
    UserRecord(
        name="Foo1 Bar1",
        create_date="2019-09-20",
        password_changed_date="2019-09-22",
        last_access_date="2025-02-08",
        mfa_enabled=False,
    ),
    UserRecord(
        name="Foo2 Bar2",
        create_date="2022-02-03",
        password_changed_date="2022-02-03",
        last_access_date="2025-04-12",
        mfa_enabled=False,
    ),
    UserRecord(
        name="Foo3 Bar3",
        create_date="2023-03-07",
        password_changed_date="2025-03-10",
        last_access_date="2022-01-03",
        mfa_enabled=True,
    ),
    UserRecord(
        name="Foo Bar4",
        create_date="2018-04-08",
        password_changed_date="2020-04-12",
        last_access_date="2022-10-04",
        mfa_enabled=False,
    ),
    UserRecord(
        name="Foo New",
        create_date="2025-04-08",
        password_changed_date="2025-04-12",
        last_access_date="2025-05-04",
        mfa_enabled=False,
    ),
)


class UserDirectory:
    """Read-only, ordered collection of user records."""

    def __init__(self, records: Iterable[UserRecord] = REFERENCE_USERS) -> None:
        self._records: Tuple[UserRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def list_users(self) -> Tuple[UserRecord, ...]:
        return self._records


def list_users() -> Tuple[UserRecord, ...]:
    """Return the reference records in declaration order."""

    return REFERENCE_USERS


__all__ = ["REFERENCE_USERS", "UserDirectory", "list_users"]
