"""Read-only access to the local Chrome history database."""

from __future__ import annotations

import logging
import os
import shutil
import sqlite3
import sys
import tempfile
from pathlib import Path

from solfhe_analyzer.exceptions import HistorySourceError
from solfhe_analyzer.history.base import HistorySource

logger = logging.getLogger(__name__)

HISTORY_PATH_ENV = "SOLFHE_CHROME_HISTORY"


def default_history_path(platform: str | None = None) -> Path:
    """Location of the default Chrome profile's History file for a platform."""
    platform = platform or sys.platform
    home = Path.home()
    if platform.startswith("win"):
        return home / "AppData" / "Local" / "Google" / "Chrome" / "User Data" / "Default" / "History"
    if platform == "darwin":
        return home / "Library" / "Application Support" / "Google" / "Chrome" / "Default" / "History"
    return home / ".config" / "google-chrome" / "Default" / "History"


class ChromeHistoryReader(HistorySource):
    """Read recently visited URLs from Chrome's History SQLite database."""

    def __init__(self, history_path: Path | str | None = None):
        if history_path is None:
            history_path = os.environ.get(HISTORY_PATH_ENV) or default_history_path()
        self.history_path = Path(history_path)

    def fetch_recent_urls(self, limit: int = 5) -> list[str]:
        """Fetch the ``limit`` most recently visited URLs, newest first."""
        if not self.history_path.exists():
            raise HistorySourceError(
                f"Chrome history database not found at {self.history_path}. "
                f"Set {HISTORY_PATH_ENV} to point at a History file."
            )

        db_copy = self._copy_db(self.history_path)
        conn: sqlite3.Connection | None = None
        try:
            conn = sqlite3.connect(str(db_copy))
            rows = conn.execute(
                "SELECT url FROM urls ORDER BY last_visit_time DESC LIMIT ?",
                (max(0, limit),),
            ).fetchall()
        except sqlite3.Error as e:
            raise HistorySourceError(f"Failed querying Chrome history: {e}") from e
        finally:
            if conn is not None:
                conn.close()
            db_copy.unlink(missing_ok=True)

        urls = [row[0] for row in rows if row[0]]
        logger.debug("Fetched %d URLs from %s", len(urls), self.history_path)
        return urls

    @staticmethod
    def _copy_db(path: Path) -> Path:
        """Chrome locks History while running; query a temporary copy instead."""
        try:
            with tempfile.NamedTemporaryFile(prefix="chrome-history-", suffix=".db", delete=False) as tmp:
                tmp_path = Path(tmp.name)
        except OSError as e:
            raise HistorySourceError(f"Cannot create temporary history copy: {e}") from e
        try:
            shutil.copy2(path, tmp_path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise HistorySourceError(f"Failed to copy Chrome history DB {path}: {e}") from e
        return tmp_path
