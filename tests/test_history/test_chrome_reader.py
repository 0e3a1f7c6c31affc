"""Tests for the Chrome history reader."""

import sqlite3
import tempfile
from pathlib import Path

import pytest

from solfhe_analyzer.exceptions import HistorySourceError
from solfhe_analyzer.history.base import HistorySource
from solfhe_analyzer.history.reader import (
    HISTORY_PATH_ENV,
    ChromeHistoryReader,
    default_history_path,
)


@pytest.fixture
def history_db(tmp_path):
    """Create a minimal Chrome History database for testing."""
    db_path = tmp_path / "History"
    conn = sqlite3.connect(str(db_path))
    conn.execute("""
        CREATE TABLE urls (
            id INTEGER PRIMARY KEY,
            url LONGVARCHAR,
            title LONGVARCHAR,
            last_visit_time INTEGER NOT NULL
        )
    """)
    rows = [
        (1, "https://app.uniswap.org/swap", 13350000000000001),
        (2, "https://ethereum.org/en/", 13350000000000003),
        (3, "https://scroll.io/bridge", 13350000000000002),
        (4, "https://docs.polkadot.network/", 13350000000000005),
        (5, "https://example.com/test", 13350000000000004),
        (6, "https://solana.com/", 13350000000000000),
    ]
    conn.executemany("INSERT INTO urls (id, url, title, last_visit_time) VALUES (?, ?, '', ?)", rows)
    conn.commit()
    conn.close()
    return db_path


def test_base_history_source_is_abstract():
    with pytest.raises(TypeError):
        HistorySource()


def test_fetch_recent_urls_newest_first(history_db):
    reader = ChromeHistoryReader(history_path=history_db)
    assert reader.fetch_recent_urls(limit=3) == [
        "https://docs.polkadot.network/",
        "https://example.com/test",
        "https://ethereum.org/en/",
    ]


def test_fetch_recent_urls_default_limit(history_db):
    reader = ChromeHistoryReader(history_path=history_db)
    urls = reader.fetch_recent_urls()
    assert len(urls) == 5
    assert "https://solana.com/" not in urls


def test_fetch_removes_temporary_copy(history_db, tmp_path, monkeypatch):
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    ChromeHistoryReader(history_path=history_db).fetch_recent_urls()
    assert list(scratch.iterdir()) == []


def test_missing_db():
    reader = ChromeHistoryReader(history_path=Path("/nonexistent/History"))
    with pytest.raises(HistorySourceError, match="not found"):
        reader.fetch_recent_urls()


def test_db_without_urls_table(tmp_path):
    db_path = tmp_path / "History"
    sqlite3.connect(str(db_path)).close()
    reader = ChromeHistoryReader(history_path=db_path)
    with pytest.raises(HistorySourceError, match="Failed querying"):
        reader.fetch_recent_urls()


def test_history_path_from_env(monkeypatch, history_db):
    monkeypatch.setenv(HISTORY_PATH_ENV, str(history_db))
    assert ChromeHistoryReader().history_path == history_db


def test_history_path_argument_wins_over_env(monkeypatch, history_db):
    monkeypatch.setenv(HISTORY_PATH_ENV, "/elsewhere/History")
    assert ChromeHistoryReader(history_path=str(history_db)).history_path == history_db


def test_default_history_path_per_platform():
    assert default_history_path("darwin").parts[-5:] == (
        "Application Support", "Google", "Chrome", "Default", "History",
    )
    assert default_history_path("win32").parts[-6:] == (
        "Local", "Google", "Chrome", "User Data", "Default", "History",
    )
    assert default_history_path("linux").parts[-4:] == (
        ".config", "google-chrome", "Default", "History",
    )
