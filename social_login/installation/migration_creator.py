from __future__ import annotations

from datetime import datetime
from pathlib import Path


class MigrationCreator:
    """Chooses where a new migration file goes.

    Files are named ``<YYYY_MM_DD_HHMMSS>_<name>.py`` so they sort
    chronologically next to migrations alembic generates with a dated
    ``file_template``.
    """

    def __init__(self, clock=datetime.now):
        self._clock = clock

    def create(self, name: str, path: Path) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        stamp = self._clock().strftime("%Y_%m_%d_%H%M%S")
        return path / f"{stamp}_{name}.py"
