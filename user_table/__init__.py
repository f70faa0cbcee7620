"""Read-only user table service."""

from __future__ import annotations

from typing import Any

from .dataset import REFERENCE_USERS, UserDirectory, list_users
from .models import UserRecord


def create_app(*args: Any, **kwargs: Any):
    """Factory function that returns the user table API application."""

    from .service import create_app as _create_app

    return _create_app(*args, **kwargs)


__all__ = [
    "REFERENCE_USERS",
    "UserDirectory",
    "UserRecord",
    "create_app",
    "list_users",
]
