"""Unified exception hierarchy for solfhe-analyzer."""


class SolfheError(Exception):
    """Base exception for all solfhe-analyzer errors."""


# History
class HistoryError(SolfheError):
    """Base exception for browser history operations."""


class HistorySourceError(HistoryError):
    """The history store could not be located, copied or read."""


# Summary
class SummaryError(SolfheError):
    """Base exception for summary encoding operations."""


class DecodeError(SummaryError):
    """An encoded summary is not valid padding-free base64."""
