"""Abstract interface for browser history sources."""

from __future__ import annotations

from abc import ABC, abstractmethod


class HistorySource(ABC):
    """Supplies the most recently visited URLs."""

    @abstractmethod
    def fetch_recent_urls(self, limit: int) -> list[str]:
        """Return up to ``limit`` URLs, most recent first.

        Raises:
            HistorySourceError: the underlying store cannot be located or read.
        """
        ...
