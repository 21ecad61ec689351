"""
Static lookup tables that steer tone, pacing, palette and framing.

Every lookup is total: unknown keys resolve to a documented default profile.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

LOGGER = logging.getLogger(__name__)

DEFAULT_MOOD = "calm"
DEFAULT_ASPECT_RATIO = "16:9"
DEFAULT_LANGUAGE_LABEL = "English"


@dataclass(frozen=True)
class MoodProfile:
    """
    Tone bundle attached to a mood name.

    Attributes:
        pacing: Short description of the edit rhythm.
        audio_description: Music bed recommendation.
        color_palette: Three hex colours, primary first.
        motion_description: Camera/animation movement style.
        lighting_description: Lighting treatment for generated visuals.
        voice_tone: Narration tone, lowercase phrase.
        hook_verb: Imperative verb used to open the hook line.
    """
    pacing: str
    audio_description: str
    color_palette: Tuple[str, str, str]
    motion_description: str
    lighting_description: str
    voice_tone: str
    hook_verb: str


@dataclass(frozen=True)
class AspectProfile:
    """Framing and safe-zone guidance for one aspect ratio."""
    framing_description: str
    safe_zone_guidance: str


MOOD_PROFILES: Dict[str, MoodProfile] = {
    "calm": MoodProfile(
        pacing="even, thoughtful cadence",
        audio_description="Soft ambient piano bed with airy pads",
        color_palette=("#E6F0FF", "#C9DBF4", "#F4F6FB"),
        motion_description="gentle parallax moves and slow dolly pushes",
        lighting_description="diffused light with cool highlights",
        voice_tone="warm, reassuring narration",
        hook_verb="Invite",
    ),
    "energetic": MoodProfile(
        pacing="snappy with dynamic emphasis",
        audio_description="Driving electronic beat with rhythmic pulses",
        color_palette=("#FFE6AA", "#FF8A65", "#3D5AFE"),
        motion_description="bold camera sweeps and quick punch-ins",
        lighting_description="high contrast with saturated accents",
        voice_tone="confident and enthusiastic",
        hook_verb="Energize",
    ),
    "inspirational": MoodProfile(
        pacing="uplifting, gradually building momentum",
        audio_description="Cinematic orchestra with light percussion",
        color_palette=("#FFF3E0", "#F8BBD0", "#B39DDB"),
        motion_description="slow reveals with lens flare accents",
        lighting_description="warm backlighting with soft bloom",
        voice_tone="aspirational and optimistic",
        hook_verb="Inspire",
    ),
}

ASPECT_PROFILES: Dict[str, AspectProfile] = {
    "16:9": AspectProfile(
        framing_description=(
            "Landscape compositions with breathable negative space for lower-third overlays."
        ),
        safe_zone_guidance=(
            "Keep essential graphics inside the central 80% to protect against cropping "
            "on social platforms."
        ),
    ),
    "9:16": AspectProfile(
        framing_description="Vertical storytelling with stacked layers and motion from bottom to top.",
        safe_zone_guidance=(
            "Constrain text to the middle 60% to avoid UI overlays on short-form platforms."
        ),
    ),
    "1:1": AspectProfile(
        framing_description="Centered compositions with symmetrical graphic arrangements.",
        safe_zone_guidance="Use a circular safe zone to keep faces and titles from getting clipped.",
    ),
}

LANGUAGE_LABELS: Dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "pt": "Portuguese",
    "it": "Italian",
    "ja": "Japanese",
    "zh": "Mandarin Chinese",
}

MOOD_OPTIONS = tuple(MOOD_PROFILES)
ASPECT_OPTIONS = tuple(ASPECT_PROFILES)
LANGUAGE_OPTIONS = tuple(LANGUAGE_LABELS)


def resolve_mood(mood: str | None) -> MoodProfile:
    profile = MOOD_PROFILES.get(mood or "")
    if profile is None:
        LOGGER.debug("Unknown mood %r, falling back to %s", mood, DEFAULT_MOOD)
        return MOOD_PROFILES[DEFAULT_MOOD]
    return profile


def resolve_aspect(aspect_ratio: str | None) -> AspectProfile:
    profile = ASPECT_PROFILES.get(aspect_ratio or "")
    if profile is None:
        LOGGER.debug("Unknown aspect ratio %r, falling back to %s", aspect_ratio, DEFAULT_ASPECT_RATIO)
        return ASPECT_PROFILES[DEFAULT_ASPECT_RATIO]
    return profile


def resolve_language(language: str | None) -> str:
    label = LANGUAGE_LABELS.get(language or "")
    if label is None:
        LOGGER.debug("Unknown language %r, falling back to %s", language, DEFAULT_LANGUAGE_LABEL)
        return DEFAULT_LANGUAGE_LABEL
    return label
