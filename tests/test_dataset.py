from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from user_table import REFERENCE_USERS, UserDirectory, list_users
from user_table.models import UserRecord


def test_list_users_is_stable_across_calls() -> None:
    first = list_users()
    second = list_users()

    assert first == second
    assert first is REFERENCE_USERS
    assert len(first) == 6
    assert first[0].name == "Foo Bar1"


def test_reference_records_are_immutable() -> None:
    with pytest.raises(FrozenInstanceError):
        REFERENCE_USERS[0].name = "Changed"  # type: ignore[misc]


def test_directory_preserves_order_and_copies_input() -> None:
    records = list(REFERENCE_USERS[:3])
    directory = UserDirectory(records)
    records.append(REFERENCE_USERS[3])

    assert len(directory) == 3
    assert directory.list_users() == REFERENCE_USERS[:3]
    assert directory.list_users() is directory.list_users()


def test_directory_defaults_to_reference_dataset() -> None:
    assert UserDirectory().list_users() == REFERENCE_USERS


def test_record_age_helpers() -> None:
    record = UserRecord(
        name="Foo Bar1",
        create_date="2020-10-01",
        password_changed_date="2021-10-01",
        last_access_date="2025-01-04",
        mfa_enabled=True,
    )
    today = date(2025, 10, 1)

    assert record.days_since_password_change(today) == 1461
    assert record.days_since_last_access(today) == 270
