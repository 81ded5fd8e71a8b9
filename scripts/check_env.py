"""Utility for checking the relay's environment configuration before a start.

The service boots even when Yahoo credentials are missing and only logs a
warning for each one. This tool loads ``AppSettings`` from the given ``.env``
file and fails instead, so a deploy can stop before the relay comes up
unable to sign anyone in.

Example usage::

    python -m scripts.check_env check --env-file /srv/relay/.env
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from app.core.config import AppSettings, YahooSettings

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_RUNTIME_ERROR = 5


class MissingCredentialsError(Exception):
    """Raised when required Yahoo settings are absent from the env file."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(", ".join(names))
        self.names = names


def _load_settings(env_file: Path) -> AppSettings:
    yahoo = YahooSettings(_env_file=env_file)  # type: ignore[call-arg]
    return AppSettings(_env_file=env_file, yahoo=yahoo)  # type: ignore[call-arg]


def _validate_settings(env_file: Path) -> AppSettings:
    """Ensure the Yahoo credentials can be loaded from the supplied env file."""
    settings = _load_settings(env_file)
    missing = settings.missing_credentials()
    if missing:
        raise MissingCredentialsError(missing)
    return settings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate Yahoo relay settings before starting the service."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check", help="Report missing or invalid Yahoo settings."
    )
    check_parser.add_argument(
        "--env-file",
        default=".env",
        type=Path,
        help="Path to the environment file (default: .env in the working directory).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    env_file: Path = args.env_file

    if not env_file.exists():
        print(f"Environment file {env_file} does not exist.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        settings = _validate_settings(env_file)
    except MissingCredentialsError as exc:
        print(f"Missing Yahoo settings: {', '.join(exc.names)}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ValidationError as exc:
        print(
            "Settings validation failed. Invalid values detected:\n"
            f"{exc.json(indent=2)}",
            file=sys.stderr,
        )
        return EXIT_VALIDATION_ERROR

    print(
        f"Settings OK for league {settings.yahoo.league_key} "
        f"(redirect URI {settings.yahoo.redirect_uri})."
    )
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
