from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .models import VideoScript
from .utils import dump_json, slugify, utc_timestamp

LOGGER = logging.getLogger(__name__)


def plan_document(script: VideoScript) -> dict:
    """camelCase JSON document for a plan."""
    return script.model_dump(mode="json", by_alias=True)


def render_markdown(script: VideoScript) -> str:
    lines: List[str] = [
        f"# {script.title}",
        "",
        f"_{script.subtitle}_",
        "",
        f"- **Hook:** {script.hook}",
        f"- **Call to action:** {script.call_to_action}",
        f"- **Aspect ratio:** {script.aspect_ratio}",
        f"- **Mood:** {script.mood} ({script.pacing})",
        f"- **Language:** {script.language}",
        f"- **Audio:** {script.audio_recommendation}",
        f"- **Palette:** {', '.join(script.color_palette)}",
        f"- **Narration:** {script.narration_style}",
        f"- **Keywords:** {', '.join(script.keywords) or '(none)'}",
        f"- **Runtime:** ~{script.total_duration_seconds}s across {script.scene_count} scenes",
        "",
        "## Scenes",
    ]
    for scene in script.scenes:
        lines.extend(
            [
                "",
                f"### {scene.id}. {scene.label} ({scene.duration})",
                "",
                f"> {scene.voiceover}",
                "",
                f"- **Visuals:** {scene.visuals}",
                f"- **Overlay:** {scene.overlay}",
                "- **Assets:**",
            ]
        )
        lines.extend(f"  - {asset}" for asset in scene.assets)
    lines.extend(["", "## Production notes", ""])
    lines.extend(f"- {note}" for note in script.production_notes)
    return "\n".join(lines) + "\n"


def export_plan(
    script: VideoScript,
    output_dir: Path,
    *,
    slug: str | None = None,
    share_url: str | None = None,
) -> Path:
    """
    Writes the plan as JSON and Markdown plus a manifest describing both.

    Args:
        script: The generated plan.
        output_dir: Destination folder (created if missing).
        slug: File stem; defaults to a slug of the plan topic.
        share_url: Optional share link recorded in the manifest.

    Returns:
        The output directory.
    """
    slug = slugify(slug or script.title.rsplit(" — ", 1)[0])
    output_dir.mkdir(parents=True, exist_ok=True)

    json_path = output_dir / f"{slug}.json"
    markdown_path = output_dir / f"{slug}.md"
    dump_json(plan_document(script), json_path)
    markdown_path.write_text(render_markdown(script), encoding="utf-8")

    manifest = {
        "slug": slug,
        "generated_at": utc_timestamp(),
        "plan": str(json_path),
        "markdown": str(markdown_path),
        "share_url": share_url,
        "scene_count": script.scene_count,
        "total_duration_seconds": script.total_duration_seconds,
    }
    dump_json(manifest, output_dir / "manifest.json")
    LOGGER.info("Plan exported to %s", output_dir)
    return output_dir
