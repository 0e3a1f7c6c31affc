"""solfhe-analyzer: keyword fingerprints of recent browser history."""

from solfhe_analyzer.exceptions import (
    DecodeError,
    HistoryError,
    HistorySourceError,
    SolfheError,
    SummaryError,
)
from solfhe_analyzer.history import ChromeHistoryReader, HistorySource
from solfhe_analyzer.keywords import KeywordCount, extract_keywords, most_frequent, record
from solfhe_analyzer.poller import BatchSummary, HistoryPoller, PollReport, PollState
from solfhe_analyzer.summary import decode_for_inspection, encode, to_result_value, verify

__all__ = [
    "DecodeError",
    "HistoryError",
    "HistorySourceError",
    "SolfheError",
    "SummaryError",
    "ChromeHistoryReader",
    "HistorySource",
    "KeywordCount",
    "extract_keywords",
    "most_frequent",
    "record",
    "BatchSummary",
    "HistoryPoller",
    "PollReport",
    "PollState",
    "decode_for_inspection",
    "encode",
    "to_result_value",
    "verify",
]
