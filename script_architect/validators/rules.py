from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List

from ..models import ValidationIssue
from ..profiles import (
    ASPECT_PROFILES,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_MOOD,
    MOOD_PROFILES,
)
from ..scene_planner import MAX_SCENE_SECONDS, MIN_SCENE_SECONDS

DURATION_RE = re.compile(r"^(?P<seconds>\d+)s$")
PRODUCTION_NOTE_COUNT = 3


def _check_scene(scene: Dict[str, Any], expected_id: int) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    scene_id = scene.get("id")

    if scene_id != expected_id:
        issues.append(
            ValidationIssue(
                code="rule.scene.id_sequence",
                message=f"Scene id {scene_id!r} breaks the 1..N sequence (expected {expected_id})",
                context={"sceneId": scene_id, "expected": expected_id},
            )
        )

    duration = str(scene.get("duration", ""))
    match = DURATION_RE.match(duration)
    if not match or not MIN_SCENE_SECONDS <= int(match.group("seconds")) <= MAX_SCENE_SECONDS:
        issues.append(
            ValidationIssue(
                code="rule.scene.duration",
                message=(
                    f"Duration {duration!r} is outside "
                    f"{MIN_SCENE_SECONDS}s-{MAX_SCENE_SECONDS}s"
                ),
                context={"sceneId": scene_id},
            )
        )

    if not scene.get("assets"):
        issues.append(
            ValidationIssue(
                code="rule.scene.assets",
                message="Scene has no supporting assets",
                context={"sceneId": scene_id},
            )
        )

    return issues


def validate_plan_rules(plan: Dict[str, Any]) -> Iterable[ValidationIssue]:
    issues: List[ValidationIssue] = []
    scenes = plan.get("scenes") or []

    if not scenes:
        issues.append(
            ValidationIssue(code="rule.plan.scenes", message="Plan has no scenes")
        )
    for position, scene in enumerate(scenes, start=1):
        issues.extend(_check_scene(scene, position))

    notes = plan.get("productionNotes") or []
    if len(notes) != PRODUCTION_NOTE_COUNT:
        issues.append(
            ValidationIssue(
                code="rule.plan.production_notes",
                message=f"Expected {PRODUCTION_NOTE_COUNT} production notes, found {len(notes)}",
            )
        )

    mood = plan.get("mood")
    if mood not in MOOD_PROFILES:
        issues.append(
            ValidationIssue(
                code="rule.profile.mood_fallback",
                message=f"Mood {mood!r} is not a known profile; '{DEFAULT_MOOD}' was used",
                severity="warning",
                context={"mood": mood},
            )
        )

    aspect_ratio = plan.get("aspectRatio")
    if aspect_ratio not in ASPECT_PROFILES:
        issues.append(
            ValidationIssue(
                code="rule.profile.aspect_fallback",
                message=(
                    f"Aspect ratio {aspect_ratio!r} is not a known profile; "
                    f"'{DEFAULT_ASPECT_RATIO}' was used"
                ),
                severity="warning",
                context={"aspectRatio": aspect_ratio},
            )
        )

    return issues
