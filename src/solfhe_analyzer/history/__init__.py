"""Browser history sources."""

from solfhe_analyzer.history.base import HistorySource
from solfhe_analyzer.history.reader import ChromeHistoryReader, default_history_path

__all__ = [
    "HistorySource",
    "ChromeHistoryReader",
    "default_history_path",
]
