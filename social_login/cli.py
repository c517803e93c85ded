#!/usr/bin/env python3
"""
social-login console commands.

Usage:
    social-login install
    social-login install --force --config-path config --migrations-path alembic/versions
"""
import argparse
import sys
from pathlib import Path

from social_login.core.config import settings
from social_login.core.logger import init_logging
from social_login.installation.installer import Installer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="social-login", description="social-login console commands")
    subparsers = parser.add_subparsers(dest="command")

    install = subparsers.add_parser("install", help="Install package config and migrations")
    install.add_argument("--force", action="store_true", help="Overwrite any existing files.")
    install.add_argument("--config-path", default=settings.CONFIG_PATH, help="Directory for the config file")
    install.add_argument(
        "--migrations-path", default=settings.MIGRATIONS_PATH, help="Directory for the alembic migration"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "install":
        init_logging()
        installer = Installer(
            config_path=Path(args.config_path),
            migrations_path=Path(args.migrations_path),
            force=args.force,
        )
        return installer.handle()

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
