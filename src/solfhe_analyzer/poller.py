"""Poll the history source and summarize new URLs in fixed-size batches."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable

from solfhe_analyzer.exceptions import DecodeError, HistorySourceError
from solfhe_analyzer.history.base import HistorySource
from solfhe_analyzer.keywords.aggregator import most_frequent, record
from solfhe_analyzer.keywords.extractor import extract_keywords
from solfhe_analyzer.summary.encoder import decode_for_inspection, encode, to_result_value

logger = logging.getLogger(__name__)

BATCH_SIZE = 5
FETCH_LIMIT = 5
POLL_INTERVAL = 60  # seconds


@dataclass
class PollState:
    """URLs and keyword counts accumulated since the last flush."""

    batch: list[str] = field(default_factory=list)
    word_counts: dict[str, int] = field(default_factory=dict)

    def reset(self) -> None:
        self.batch.clear()
        self.word_counts.clear()


@dataclass
class BatchSummary:
    """What a flushed batch produced."""

    value: dict
    encoded: str
    inspection: str | None
    inspection_error: str = ""
    # how many of the poll's analyzed URLs came before the flush
    position: int = 0


@dataclass
class PollReport:
    """Outcome of a single poll."""

    analyzed: list[str] = field(default_factory=list)
    summaries: list[BatchSummary] = field(default_factory=list)
    no_new_links: bool = False


class HistoryPoller:
    """Drive keyword analysis of newly visited URLs.

    Args:
        source: Where recent URLs come from.
        fetch_retries: Extra fetch attempts before a history error is raised.
            0 fails on the first error.
    """

    def __init__(
        self,
        source: HistorySource,
        batch_size: int = BATCH_SIZE,
        fetch_limit: int = FETCH_LIMIT,
        fetch_retries: int = 0,
    ):
        self.source = source
        self.batch_size = batch_size
        self.fetch_limit = fetch_limit
        self.fetch_retries = max(0, fetch_retries)
        self.state = PollState()

    def poll_once(self) -> PollReport:
        """Fetch recent URLs once and analyze the ones not yet in the batch."""
        report = PollReport()
        urls = self._fetch()
        if not urls:
            logger.info("No new links found")
            report.no_new_links = True
            return report

        for url in urls:
            if url in self.state.batch:
                continue
            self.state.batch.append(url)
            record(extract_keywords(url), self.state.word_counts)
            report.analyzed.append(url)
            logger.debug("Analyzed new link: %s", url)

            if len(self.state.batch) >= self.batch_size:
                summary = self._flush()
                summary.position = len(report.analyzed)
                report.summaries.append(summary)
        return report

    def run(
        self,
        stop_event: threading.Event | None = None,
        interval: float = POLL_INTERVAL,
        on_report: Callable[[PollReport], None] | None = None,
    ) -> None:
        """Poll every ``interval`` seconds until ``stop_event`` is set."""
        stop_event = stop_event or threading.Event()
        logger.info("Polling %s every %ss", type(self.source).__name__, interval)
        while not stop_event.is_set():
            report = self.poll_once()
            if on_report is not None:
                on_report(report)
            if stop_event.wait(interval):
                break
        logger.info("Polling stopped")

    def _fetch(self) -> list[str]:
        for attempt in range(self.fetch_retries + 1):
            try:
                return self.source.fetch_recent_urls(self.fetch_limit)
            except HistorySourceError as e:
                if attempt >= self.fetch_retries:
                    raise
                wait = 2 ** attempt
                logger.warning(f"History fetch failed ({e}), retrying in {wait}s (attempt {attempt + 1})")
                time.sleep(wait)

    def _flush(self) -> BatchSummary:
        value = to_result_value(most_frequent(self.state.word_counts))
        encoded = encode(value)
        try:
            inspection = decode_for_inspection(encoded)
            error = ""
        except DecodeError as e:
            logger.warning("Error decompressing %s: %s", encoded, e)
            inspection = None
            error = str(e)
        logger.info("Flushed batch of %d URLs: %s", len(self.state.batch), value)
        self.state.reset()
        return BatchSummary(value=value, encoded=encoded, inspection=inspection, inspection_error=error)
