"""
Pydantic models for the request a caller supplies and the production plan the
generator returns, plus the issue/report models produced by plan validation.

Attribute names are snake_case; documents are serialised with camelCase
aliases (``model_dump(by_alias=True)``) so the JSON matches the field names the
presentation layer renders.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Document(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ScriptRequest(_Document):
    """
    Everything the caller chooses for a single generation.

    Categorical fields are not validated against the known option sets; unknown
    values are resolved to default profiles during generation.
    """
    topic: str = Field(description="Subject of the video, used in the title and keyword mining.")
    story: str = Field(default="", description="Free-form narrative; one beat per sentence.")
    aspect_ratio: str = Field(default="16:9", description="Frame identifier such as '16:9', '9:16' or '1:1'.")
    mood: str = Field(default="calm", description="Mood key selecting tone, pacing and palette.")
    keywords: str = Field(
        default="",
        description="Comma, semicolon or newline separated keywords that take priority over mined ones.",
    )
    language: str = Field(default="en", description="Narration language code; only changes labels.")


class ScenePlan(_Document):
    """
    One narrated scene. Scenes map 1:1 onto story beats and keep their order.
    """
    id: int = Field(description="1-based position of the scene in the plan.")
    label: str = Field(description="Classification such as 'Opening Hook' or 'Learning Beat'.")
    voiceover: str = Field(description="The beat text, verbatim.")
    duration: str = Field(description="Estimated spoken duration, e.g. '6s'.")
    visuals: str = Field(description="Visual direction for the scene.")
    overlay: str = Field(description="Short on-screen text.")
    assets: List[str] = Field(description="Supporting asset suggestions; never empty.")

    @property
    def duration_seconds(self) -> int:
        return int(self.duration.rstrip("s"))


class VideoScript(_Document):
    """
    The complete production plan for one request.
    """
    title: str
    subtitle: str
    hook: str
    call_to_action: str
    aspect_ratio: str = Field(description="Aspect ratio as requested (not the resolved profile key).")
    mood: str = Field(description="Mood as requested (not the resolved profile key).")
    language: str = Field(description="Resolved language label, e.g. 'English'.")
    pacing: str
    audio_recommendation: str
    color_palette: List[str]
    keywords: List[str]
    narration_style: str
    scenes: List[ScenePlan]
    production_notes: List[str]

    @property
    def scene_count(self) -> int:
        return len(self.scenes)

    @property
    def total_duration_seconds(self) -> int:
        return sum(scene.duration_seconds for scene in self.scenes)


class ValidationIssue(BaseModel):
    """
    Represents a single issue found while validating a generated plan.
    """
    code: str = Field(description="A unique code identifying the type of validation issue.")
    message: str = Field(description="A human-readable description of the issue.")
    severity: str = Field(default="error", description="The severity of the issue (e.g., 'error', 'warning').")
    context: Dict[str, object] = Field(
        default_factory=dict,
        description="Additional context relevant to the issue (e.g., scene id, path).",
    )


class ValidationReport(BaseModel):
    """
    Summarizes the results of validating a plan.
    """
    is_valid: bool = Field(description="True if no error-level issue was found.")
    issues: List[ValidationIssue] = Field(
        default_factory=list,
        description="A list of all validation issues found.",
    )

    @property
    def errors(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]
