"""Assemble the full video production plan for a request."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from .keywords import derive_keywords
from .lexicon import capitalize, count_words, round_half_up
from .models import ScenePlan, ScriptRequest, VideoScript
from .profiles import AspectProfile, MoodProfile, resolve_aspect, resolve_language, resolve_mood
from .scene_planner import plan_scenes
from .segmenter import normalize_story, parse_story_beats

LOGGER = logging.getLogger(__name__)

MIX_LOUDNESS_TARGET = "-18 LUFS"
CLOSING_PHRASE = "invite viewers to explore how they can apply AI in everyday workflows."
NOTE_KEYWORD_COUNT = 3


def average_words_per_beat(beats: Sequence[str]) -> float:
    if not beats:
        return 0.0
    return sum(count_words(beat) for beat in beats) / len(beats)


def build_production_notes(
    keywords: Sequence[str],
    mood: MoodProfile,
    aspect: AspectProfile,
) -> list[str]:
    key_phrases = ", ".join(capitalize(keyword) for keyword in keywords[:NOTE_KEYWORD_COUNT])
    return [
        aspect.safe_zone_guidance,
        f"Underscore narration with {mood.audio_description.lower()} mixed at "
        f"{MIX_LOUDNESS_TARGET} for clarity.",
        f"Animate key phrases like {key_phrases} using {mood.motion_description}.",
    ]


def _hook(mood: MoodProfile, opening: ScenePlan) -> str:
    return f'{mood.hook_verb} viewers with: "{opening.voiceover}"'


def _call_to_action(closing: ScenePlan) -> str:
    return f'Close by reinforcing "{closing.voiceover}" and {CLOSING_PHRASE}'


def generate(request: ScriptRequest | Mapping[str, Any]) -> VideoScript:
    """
    Turns a request into a complete, scene-by-scene production plan.

    The function is pure: unknown mood, aspect ratio or language values
    resolve to default profiles, and an empty story is replaced by a default
    three-beat narrative, so every well-formed request yields a plan with at
    least one scene.

    Args:
        request: A ScriptRequest, or a mapping validated into one (snake_case
                 or camelCase keys).

    Returns:
        The generated VideoScript.

    Raises:
        pydantic.ValidationError: If a mapping cannot be validated into a request.
    """
    if not isinstance(request, ScriptRequest):
        request = ScriptRequest.model_validate(request)

    story = normalize_story(request.story)
    beats = parse_story_beats(story)
    keywords = derive_keywords(request.topic, story, request.keywords)
    mood = resolve_mood(request.mood)
    aspect = resolve_aspect(request.aspect_ratio)
    language_label = resolve_language(request.language)

    scenes = plan_scenes(beats, keywords=keywords, mood=mood, aspect=aspect)
    opening, closing = scenes[0], scenes[-1]
    tone = capitalize(mood.voice_tone)
    pause_every = round_half_up(average_words_per_beat(beats))

    LOGGER.info(
        "Generated plan | topic=%r scenes=%d keywords=%d mood=%s aspect=%s",
        request.topic,
        len(scenes),
        len(keywords),
        request.mood,
        request.aspect_ratio,
    )

    return VideoScript(
        title=f"{request.topic} — {tone}",
        subtitle=(
            f"A {language_label.lower()} explainer crafted for a {request.aspect_ratio} frame."
        ),
        hook=_hook(mood, opening),
        call_to_action=_call_to_action(closing),
        aspect_ratio=request.aspect_ratio,
        mood=request.mood,
        language=language_label,
        pacing=mood.pacing,
        audio_recommendation=mood.audio_description,
        color_palette=list(mood.color_palette),
        keywords=keywords,
        narration_style=(
            f"{tone} delivered in {language_label}, with natural pauses that land every "
            f"{pause_every} words."
        ),
        scenes=scenes,
        production_notes=build_production_notes(keywords, mood, aspect),
    )
