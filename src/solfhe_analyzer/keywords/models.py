"""Data models for keyword statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordCount:
    """The most frequent keyword of a batch and how often it was seen."""

    word: str
    count: int
