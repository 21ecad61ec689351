"""
Keyword derivation: caller-supplied keywords first, then the most frequent
content words of the topic and story as a fallback.
"""
from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, List

from .lexicon import is_stop_word, tokenize

KEYWORD_SPLIT_RE = re.compile(r"[,;\n]+")
AI_WORD_RE = re.compile(r"\bai\b", re.IGNORECASE)

MAX_STORY_KEYWORDS = 8
MIN_KEYWORD_LENGTH = 3


def _unique(values: Iterable[str]) -> List[str]:
    """Keep the first occurrence of each value, compared case-insensitively."""
    seen: set[str] = set()
    unique: List[str] = []
    for value in values:
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(value)
    return unique


def parse_keyword_list(raw_keywords: str) -> List[str]:
    """Split a comma/semicolon/newline separated string into lowercase keywords."""
    parts = (part.strip().lower() for part in KEYWORD_SPLIT_RE.split(raw_keywords or ""))
    return _unique(part for part in parts if part)


def extract_story_keywords(text: str, limit: int = MAX_STORY_KEYWORDS) -> List[str]:
    """
    Ranks content words by frequency.

    Stop words and tokens shorter than three characters are ignored. Ties keep
    the order in which the words first appeared.

    Args:
        text: Text to mine, typically ``"{topic}. {story}"``.
        limit: Maximum number of keywords to return.

    Returns:
        Up to ``limit`` lowercase keywords, most frequent first.
    """
    counts: Counter[str] = Counter(
        token
        for token in tokenize(text)
        if len(token) >= MIN_KEYWORD_LENGTH and not is_stop_word(token)
    )
    # Counter preserves insertion order and sorted() is stable.
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:limit]]


def normalize_ai(keyword: str) -> str:
    return AI_WORD_RE.sub("AI", keyword)


def derive_keywords(topic: str, story: str, raw_keywords: str) -> List[str]:
    """
    Builds the plan keyword list.

    Args:
        topic: Video topic.
        story: Normalised story text (carriage returns removed, trimmed).
        raw_keywords: Caller-supplied delimited keyword string.

    Returns:
        Caller keywords in their original order followed by frequency-ranked
        story keywords, de-duplicated case-insensitively, with ``ai`` rendered
        as ``AI``.
    """
    provided = parse_keyword_list(raw_keywords)
    fallback = extract_story_keywords(f"{topic}. {story}")
    return [normalize_ai(keyword) for keyword in _unique([*provided, *fallback])]
