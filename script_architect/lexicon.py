"""Small text helpers shared by the keyword, segmentation and scene planning stages."""
from __future__ import annotations

import math
import re
from typing import List

NON_TOKEN_RE = re.compile(r"[^a-z0-9\s]")

# English only. The language option never reaches tokenisation.
STOP_WORDS = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "by",
        "for",
        "from",
        "how",
        "in",
        "into",
        "is",
        "it",
        "of",
        "on",
        "or",
        "that",
        "the",
        "to",
        "with",
        "what",
        "why",
        "when",
        "does",
        "do",
        "can",
        "like",
        "just",
    }
)


def tokenize(text: str) -> List[str]:
    """
    Lowercases the text, blanks out anything that is not a letter, digit or
    whitespace, and splits on whitespace.

    Args:
        text: The input string.

    Returns:
        A list of non-empty lowercase tokens in document order.
    """
    cleaned = NON_TOKEN_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if token]


def is_stop_word(token: str) -> bool:
    return token in STOP_WORDS


def capitalize(value: str) -> str:
    """Uppercase the first character only; the rest is left untouched."""
    if not value:
        return value
    return value[0].upper() + value[1:]


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (``round`` would give 2 for 2.5)."""
    return int(math.floor(value + 0.5))


def count_words(text: str) -> int:
    return len(text.split())
