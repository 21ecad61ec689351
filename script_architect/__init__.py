"""
Deterministic video script planning.

Turns a topic, a short narrative and a few categorical options (mood, aspect
ratio, language, keywords) into a scene-by-scene production plan with
voiceover, timing, visual direction, overlays and supporting assets.
"""

from .generator import generate
from .models import ScenePlan, ScriptRequest, ValidationIssue, ValidationReport, VideoScript
from .share import DEFAULT_REQUEST, build_share_url, decode_query, encode_query
from .validators import validate_plan

__all__ = [
    "DEFAULT_REQUEST",      # Sample request used when no parameters are given
    "ScenePlan",            # One planned scene
    "ScriptRequest",        # Caller-supplied generation options
    "ValidationIssue",
    "ValidationReport",
    "VideoScript",          # The complete plan document
    "build_share_url",
    "decode_query",
    "encode_query",
    "generate",             # Core entry point: request -> plan
    "validate_plan",
]
