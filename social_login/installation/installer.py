"""Publishes the package's config template and migration into a host project.

Usage:
    social-login install
    social-login install --force
"""
from __future__ import annotations

import importlib
import logging
import shutil
from pathlib import Path

from social_login.core.exceptions import PublishedFileExistsError

from .migration_creator import MigrationCreator

logger = logging.getLogger(__name__)

STUBS_DIR = Path(__file__).resolve().parent.parent / "stubs"
CONFIG_STUB = STUBS_DIR / "social_login.env"
MIGRATION_STUB = STUBS_DIR / "create_oauth_identities_table.py.stub"
MIGRATION_NAME = "create_oauth_identities_table"


class Installer:
    """Copies config and migration files into the host project."""

    def __init__(
        self,
        config_path: Path,
        migrations_path: Path,
        force: bool = False,
        migration_creator: MigrationCreator | None = None,
    ):
        self.config_path = Path(config_path)
        self.migrations_path = Path(migrations_path)
        self.force = force
        self.migration_creator = migration_creator or MigrationCreator()

    def handle(self) -> int:
        try:
            self.publish_config()
            self.publish_migrations()
        except PublishedFileExistsError as e:
            logger.warning(f"Install skipped, file exists: {e.path}")
            print("❌ It looks like this package has already been installed. Use --force to override.")

        # Newly written modules must be importable by this interpreter
        importlib.invalidate_caches()
        print("✅ Package configuration and migrations installed!")
        return 0

    def publish_config(self) -> Path:
        target = self.config_path / CONFIG_STUB.name
        self.publish_file(CONFIG_STUB, target)
        print(f"✅ Configuration published: {target}")
        return target

    def publish_migrations(self) -> Path:
        target = self.migration_creator.create(MIGRATION_NAME, self.migrations_path)
        target.write_text(MIGRATION_STUB.read_text(encoding="utf-8"), encoding="utf-8")
        logger.info(f"Migration written to {target}")
        print(f"✅ Migration published: {target}")
        return target

    def publish_file(self, source: Path, target: Path) -> None:
        """
        Copy ``source`` to ``target``.

        Raises:
            PublishedFileExistsError: If target exists and force is off
        """
        if target.exists() and not self.force:
            raise PublishedFileExistsError(str(target))
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        logger.info(f"Published {source.name} to {target}")
