from __future__ import annotations

import json

import pytest

from user_table.dataset import REFERENCE_USERS
from user_table.models import UserRecord
from user_table.serialization import SerializationError, decode_users, encode_users


def test_encoding_round_trips_reference_dataset() -> None:
    payload = encode_users(REFERENCE_USERS)

    assert isinstance(payload, bytes)
    assert decode_users(payload) == list(REFERENCE_USERS)


def test_encoding_uses_snake_case_keys() -> None:
    payload = json.loads(encode_users(REFERENCE_USERS[:1]))

    assert payload == [
        {
            "name": "Foo Bar1",
            "create_date": "2020-10-01",
            "password_changed_date": "2021-10-01",
            "last_access_date": "2025-01-04",
            "mfa_enabled": True,
        }
    ]


def test_empty_sequence_encodes_to_empty_array() -> None:
    assert json.loads(encode_users([])) == []


def test_invalid_record_raises_serialization_error() -> None:
    record = UserRecord(
        name=object(),  # type: ignore[arg-type]
        create_date="2020-01-01",
        password_changed_date="2020-01-01",
        last_access_date="2020-01-01",
        mfa_enabled=False,
    )

    with pytest.raises(SerializationError) as excinfo:
        encode_users([record])

    assert excinfo.value.__cause__ is not None


@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b'{"name": "Foo"}',
        b'[{"name": "Foo"}]',
        b'[{"name": "Foo", "create_date": "2020-01-01", "password_changed_date": "2020-01-01",'
        b' "last_access_date": "2020-01-01", "mfa_enabled": "yes"}]',
    ],
)
def test_decode_rejects_malformed_payloads(payload: bytes) -> None:
    with pytest.raises(SerializationError):
        decode_users(payload)


@pytest.mark.parametrize("value", ["yesterday", "2020-01-01T10:00:00", "2021-02-29"])
def test_decode_rejects_malformed_dates(value: str) -> None:
    payload = json.dumps(
        [
            {
                "name": "Foo",
                "create_date": "2020-01-01",
                "password_changed_date": value,
                "last_access_date": "2020-01-01",
                "mfa_enabled": True,
            }
        ]
    )

    with pytest.raises(SerializationError, match="Invalid date"):
        decode_users(payload)
