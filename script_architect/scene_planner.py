"""Turn narration beats into scene plans.

Each beat gets a representative keyword, a label, a duration estimate, an
overlay line, visual direction and supporting assets. Classification is done
with ordered rule tables: for labels and visuals the first matching rule wins,
for assets every matching rule contributes.
"""
from __future__ import annotations

import re
from typing import Callable, List, Sequence, Tuple

from .lexicon import capitalize, clamp, count_words, round_half_up
from .models import ScenePlan
from .profiles import AspectProfile, MoodProfile

WORDS_PER_SECOND = 2.7
MIN_SCENE_SECONDS = 4
MAX_SCENE_SECONDS = 9

FALLBACK_KEYWORD = "insight"
OVERLAY_MAX_WORDS = 6
OVERLAY_MIN_WORD_LENGTH = 3
OVERLAY_STRIP_RE = re.compile(r"[^a-zA-Z0-9\s]")

VisualProducer = Callable[[str, MoodProfile, AspectProfile], str]


# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------

# (triggers, label); checked after the positional Opening/Closing rules.
LABEL_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("learns", "learning"), "Learning Beat"),
    (("predict", "recognize"), "Application Beat"),
)

VISUAL_RULES: Tuple[Tuple[Tuple[str, ...], VisualProducer], ...] = (
    (
        ("data", "patterns"),
        lambda keyword, mood, aspect: (
            "Visualize flowing data points morphing into a neural network mesh; "
            f"{mood.motion_description} with {mood.lighting_description}."
        ),
    ),
    (
        ("predict", "outcomes"),
        lambda keyword, mood, aspect: (
            "Show predictive dashboards coming to life with confident highlights; "
            f"{aspect.framing_description}"
        ),
    ),
    (
        ("learn", "training"),
        lambda keyword, mood, aspect: (
            "Illustrate an AI training loop with layered animations that progressively refine, "
            f"paired with {mood.motion_description}."
        ),
    ),
    (
        ("experience", "humans"),
        lambda keyword, mood, aspect: (
            "Contrast human learning and machine learning through mirrored compositions, "
            f"gently lit to stay {mood.lighting_description}."
        ),
    ),
)

ASSET_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("data",), "Overlay graph that pulses in sync with narration."),
    (("predict",), "HUD-style animation showing probability bars filling up."),
    (("adjust", "improves"), "Progress bar that subtly advances with each beat."),
)


def _mentions(lowered: str, triggers: Sequence[str]) -> bool:
    return any(trigger in lowered for trigger in triggers)


# ---------------------------------------------------------------------------
# Per-beat heuristics
# ---------------------------------------------------------------------------


def select_keyword(voiceover: str, keywords: Sequence[str], index: int) -> str:
    """
    Picks the keyword that best represents a beat.

    Args:
        voiceover: The beat text.
        keywords: The plan keyword list, in priority order.
        index: Zero-based beat position, used for round-robin fallback.

    Returns:
        The first keyword found in the beat (case-insensitive substring match),
        otherwise ``keywords[index % len(keywords)]``, otherwise ``"insight"``.
    """
    lowered = voiceover.lower()
    for keyword in keywords:
        if keyword.lower() in lowered:
            return keyword
    if keywords:
        return keywords[index % len(keywords)]
    return FALLBACK_KEYWORD


def build_scene_label(index: int, total: int, voiceover: str) -> str:
    # Position rules first: a single-beat story is an Opening Hook.
    if index == 0:
        return "Opening Hook"
    if index == total - 1:
        return "Closing Insight"

    lowered = voiceover.lower()
    for triggers, label in LABEL_RULES:
        if _mentions(lowered, triggers):
            return label
    return f"Beat {index + 1}"


def estimate_duration_seconds(voiceover: str) -> int:
    """Spoken length at ~2.7 words per second, kept within 4-9 seconds."""
    estimated = round_half_up(count_words(voiceover) / WORDS_PER_SECOND)
    return int(clamp(estimated, MIN_SCENE_SECONDS, MAX_SCENE_SECONDS))


def format_duration(seconds: int) -> str:
    return f"{seconds}s"


def create_overlay(voiceover: str, keyword: str) -> str:
    """
    Condenses a beat into on-screen text from its leading content words.

    Punctuation is dropped, words of two characters or fewer are skipped and
    at most six words are kept. When nothing survives, the overlay falls back
    to ``"Key idea: <Keyword>"``.
    """
    words = [
        word
        for word in OVERLAY_STRIP_RE.sub("", voiceover).split()
        if len(word) >= OVERLAY_MIN_WORD_LENGTH
    ]
    condensed = " ".join(words[:OVERLAY_MAX_WORDS])
    if condensed:
        return capitalize(condensed)
    return f"Key idea: {capitalize(keyword)}"


def create_visual_direction(
    voiceover: str,
    keyword: str,
    mood: MoodProfile,
    aspect: AspectProfile,
) -> str:
    lowered = voiceover.lower()
    for triggers, producer in VISUAL_RULES:
        if _mentions(lowered, triggers):
            return producer(keyword, mood, aspect)
    primary, secondary = mood.color_palette[0], mood.color_palette[1]
    return f"Create calm, abstract imagery around {keyword}, using {primary} and {secondary} accents."


def create_supporting_assets(voiceover: str, keyword: str) -> List[str]:
    lowered = voiceover.lower()
    assets = [asset for triggers, asset in ASSET_RULES if _mentions(lowered, triggers)]
    assets.append(f"B-roll: contextual visuals highlighting {keyword}.")
    return assets


# ---------------------------------------------------------------------------
# Scene assembly
# ---------------------------------------------------------------------------


def plan_scene(
    voiceover: str,
    index: int,
    total: int,
    *,
    keywords: Sequence[str],
    mood: MoodProfile,
    aspect: AspectProfile,
) -> ScenePlan:
    keyword = select_keyword(voiceover, keywords, index)
    return ScenePlan(
        id=index + 1,
        label=build_scene_label(index, total, voiceover),
        voiceover=voiceover,
        duration=format_duration(estimate_duration_seconds(voiceover)),
        visuals=create_visual_direction(voiceover, keyword, mood, aspect),
        overlay=create_overlay(voiceover, keyword),
        assets=create_supporting_assets(voiceover, keyword),
    )


def plan_scenes(
    beats: Sequence[str],
    *,
    keywords: Sequence[str],
    mood: MoodProfile,
    aspect: AspectProfile,
) -> List[ScenePlan]:
    """
    Plans every beat in order.

    Args:
        beats: Narration beats, in document order.
        keywords: The plan keyword list.
        mood: Resolved mood profile.
        aspect: Resolved aspect profile.

    Returns:
        One ScenePlan per beat with ids 1..N.
    """
    total = len(beats)
    return [
        plan_scene(beat, index, total, keywords=keywords, mood=mood, aspect=aspect)
        for index, beat in enumerate(beats)
    ]
