"""Split a free-form narrative into ordered narration beats (one beat per scene)."""
from __future__ import annotations

import re
from typing import List

LINE_BREAK_RE = re.compile(r"\n+")
# Boundary punctuation stays attached to the sentence before it. Abbreviations
# such as "Dr. Smith" are split and lowercase continuations are not.
SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+(?=[A-Z])")

DEFAULT_STORY_BEATS: tuple[str, ...] = (
    "Artificial intelligence studies patterns in data to learn how the world works.",
    "By watching thousands of examples, it recognizes relationships and makes predictions.",
    "With every iteration, the system fine-tunes itself, improving just like human learning.",
)


def normalize_story(story: str) -> str:
    """Drop carriage returns and surrounding whitespace."""
    return story.replace("\r", "").strip()


def split_sentences(paragraph: str) -> List[str]:
    sentences = (sentence.strip() for sentence in SENTENCE_BOUNDARY_RE.split(paragraph))
    return [sentence for sentence in sentences if sentence]


def parse_story_beats(story: str) -> List[str]:
    """
    Breaks the story into beats: first by line, then by sentence boundary.

    Args:
        story: Raw multi-line narrative, possibly empty.

    Returns:
        A non-empty list of trimmed beats in document order. An empty or
        whitespace-only story yields the default three-beat narrative.
    """
    lines = [line.strip() for line in LINE_BREAK_RE.split(normalize_story(story))]
    lines = [line for line in lines if line]

    if not lines:
        return list(DEFAULT_STORY_BEATS)

    beats: List[str] = []
    for line in lines:
        beats.extend(split_sentences(line))
    return beats
