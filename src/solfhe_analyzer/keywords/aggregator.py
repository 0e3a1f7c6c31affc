"""Per-batch keyword frequency counting."""

from __future__ import annotations

from typing import Iterable

from solfhe_analyzer.keywords.models import KeywordCount

BLOCKCHAIN_NETWORKS = frozenset({
    "bitcoin", "ethereum", "scroll", "polkadot", "solana", "avalanche", "cosmos",
    "algorand", "mina", "chainlink", "uniswap", "aave", "compound", "maker",
    "polygon", "binance", "tron", "wormhole", "stellar", "filecoin",
})

MIN_KEYWORD_LENGTH = 4


def is_counted(keyword: str) -> bool:
    """Network names always count; anything else needs more than 3 characters."""
    return keyword in BLOCKCHAIN_NETWORKS or len(keyword) >= MIN_KEYWORD_LENGTH


def record(keywords: Iterable[str], table: dict[str, int]) -> None:
    """Add the qualifying keywords to ``table`` in place."""
    for keyword in keywords:
        if is_counted(keyword):
            table[keyword] = table.get(keyword, 0) + 1


def most_frequent(table: dict[str, int]) -> KeywordCount | None:
    """Return the highest count in ``table``, or None if nothing was recorded.

    Ties go to the keyword recorded first: a later entry only takes the lead
    with a strictly greater count.
    """
    best: KeywordCount | None = None
    for word, count in table.items():
        if best is None or count > best.count:
            best = KeywordCount(word=word, count=count)
    return best
