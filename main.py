"""Command-line interface for the user table service."""

from __future__ import annotations
import argparse
import logging
import os
import sys
from datetime import date
from pathlib import Path
from typing import Sequence


def _running_in_virtualenv() -> bool:
    """Return ``True`` when the current interpreter is executing inside a venv."""

    base_prefix = getattr(sys, "base_prefix", sys.prefix)
    return sys.prefix != base_prefix


def _bootstrap_virtualenv() -> None:
    """Re-exec the script using the bundled virtualenv interpreter when available."""

    if _running_in_virtualenv():
        return

    root = Path(__file__).resolve().parent
    venv_dir = root / ".venv"
    if not venv_dir.is_dir():
        return

    candidates = (
        venv_dir / "bin" / "python",
        venv_dir / "bin" / "python3",
        venv_dir / "Scripts" / "python.exe",
        venv_dir / "Scripts" / "python",
    )

    script = str(Path(__file__).resolve())
    for candidate in candidates:
        if candidate.exists():
            os.execv(str(candidate), [str(candidate), script, *sys.argv[1:]])


if __name__ == "__main__":
    _bootstrap_virtualenv()

from user_table.client import UsersClient, UsersClientError
from user_table.config import ServiceConfig, parse_port, resolve_dataset_path
from user_table.models import UserRecord

logger = logging.getLogger("usertable.main")

_DEFAULT_SERVICE_URL = "http://localhost:8080"


def _port_argument(value: str) -> int:
    try:
        return parse_port(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="User table service utilities")
    subparsers = parser.add_subparsers(dest="command")

    parser.set_defaults(command="serve")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP user table service")
    serve_parser.add_argument(
        "--host",
        default=None,
        help="Bind address for the API (default: $USER_TABLE_HOST or 0.0.0.0)",
    )
    serve_parser.add_argument(
        "--port",
        type=_port_argument,
        default=None,
        help="Port for the HTTP API (default: $USER_TABLE_PORT or 8080)",
    )
    serve_parser.add_argument(
        "--dataset",
        default=None,
        help="YAML file with a 'users' list to serve instead of the built-in records",
    )

    list_parser = subparsers.add_parser(
        "list", help="Print the users reported by a running service"
    )
    list_parser.add_argument(
        "--service-url",
        default=None,
        help=(
            "Base URL of a running user table service "
            f"(default: $USER_TABLE_SERVICE_URL or {_DEFAULT_SERVICE_URL})"
        ),
    )

    args_list = list(argv) if argv is not None else sys.argv[1:]
    known_commands = {"serve", "list"}

    if not args_list:
        args_list = ["serve"]
    else:
        first = args_list[0]
        if first in ("-h", "--help"):
            return parser.parse_args(args_list)
        if first not in known_commands:
            if any(flag in args_list for flag in ("-h", "--help")):
                return parser.parse_args(args_list)
            args_list = ["serve", *args_list]

    return parser.parse_args(args_list)


def _resolve_config(args: argparse.Namespace) -> ServiceConfig:
    try:
        config = ServiceConfig.from_env()
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    return ServiceConfig(
        host=args.host or config.host,
        port=args.port if args.port is not None else config.port,
        dataset_path=resolve_dataset_path(args.dataset) or config.dataset_path,
    )


def _serve(config: ServiceConfig) -> None:
    from user_table.service import create_app
    import uvicorn

    try:
        app = create_app(config=config)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Unable to load user dataset: {exc}") from exc

    logger.info(
        "Serving %d user record(s) on http://%s:%s",
        len(app.state.directory),
        config.host,
        config.port,
    )
    uvicorn.run(app, host=config.host, port=config.port, log_level="info")


def _format_mfa(record: UserRecord) -> str:
    return "Enabled" if record.mfa_enabled else "Disabled"


def _print_users(users: Sequence[UserRecord], *, today: date | None = None) -> None:
    if not users:
        print("No users were returned by the service.")
        return

    current = today or date.today()
    print(f"{len(users)} user(s) found:")
    print(f"{'Name':<24}  {'Created':<10}  {'Pwd age (d)':>11}  {'Last seen (d)':>13}  MFA")
    print("-" * 74)
    for user in users:
        print(
            f"{user.name:<24}  {user.create_date:<10}  "
            f"{user.days_since_password_change(current):>11}  "
            f"{user.days_since_last_access(current):>13}  {_format_mfa(user)}"
        )


def _list_users(service_url: str | None) -> int:
    base_url = service_url or os.getenv("USER_TABLE_SERVICE_URL") or _DEFAULT_SERVICE_URL

    try:
        users = UsersClient(base_url).fetch_users()
    except (UsersClientError, ValueError) as exc:
        print(exc)
        return 1

    _print_users(users)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for CLI usage."""

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    args = _parse_args(argv)

    if args.command == "serve":
        _serve(_resolve_config(args))
    elif args.command == "list":
        status = _list_users(args.service_url)
        if status:
            raise SystemExit(status)


if __name__ == "__main__":
    main()
