"""Keyword extraction and frequency aggregation for visited URLs."""

from solfhe_analyzer.keywords.extractor import extract_keywords, IGNORED_WORDS
from solfhe_analyzer.keywords.aggregator import (
    BLOCKCHAIN_NETWORKS,
    is_counted,
    most_frequent,
    record,
)
from solfhe_analyzer.keywords.models import KeywordCount

__all__ = [
    "extract_keywords",
    "IGNORED_WORDS",
    "BLOCKCHAIN_NETWORKS",
    "is_counted",
    "most_frequent",
    "record",
    "KeywordCount",
]
