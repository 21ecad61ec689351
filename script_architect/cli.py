"""Command line entry point: build a video script plan from flags, a share link or a JSON request."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from .config import ensure_output_dir, load_settings
from .exporter import export_plan, plan_document, render_markdown
from .generator import generate
from .logging_utils import setup_logging
from .models import ScriptRequest
from .profiles import ASPECT_OPTIONS, LANGUAGE_OPTIONS, MOOD_OPTIONS
from .share import DEFAULT_REQUEST, build_share_url, request_from_params
from .utils import load_json
from .validators import validate_plan

LOGGER = logging.getLogger(__name__)

# CLI flag dest -> request field
FLAG_FIELDS = {
    "topic": "topic",
    "story": "story",
    "aspect_ratio": "aspect_ratio",
    "mood": "mood",
    "keywords": "keywords",
    "language": "language",
}


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Turn a short narrative into a scene-by-scene video production plan."
    )
    parser.add_argument("--topic", help="Video topic.")
    parser.add_argument("--story", help="Narrative text; one scene per sentence.")
    parser.add_argument("--story-file", type=Path, help="Read the narrative from a text file.")
    parser.add_argument(
        "--aspect-ratio",
        help=f"Frame format ({', '.join(ASPECT_OPTIONS)}); unknown values use 16:9.",
    )
    parser.add_argument(
        "--mood",
        help=f"Mood profile ({', '.join(MOOD_OPTIONS)}); unknown values use calm.",
    )
    parser.add_argument("--keywords", help="Comma separated keywords that guide visuals and overlays.")
    parser.add_argument(
        "--language",
        help=f"Narration language code ({', '.join(LANGUAGE_OPTIONS)}).",
    )
    parser.add_argument(
        "--query",
        help="Query string or share URL to start from (e.g. 'topic=...&mood=calm').",
    )
    parser.add_argument(
        "--request-file",
        type=Path,
        help="JSON file with request fields (snake_case or camelCase).",
    )
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Output format written to stdout. Default: %(default)s",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Export JSON, Markdown and manifest into this folder instead of stdout.",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Export into SCRIPT_ARCHITECT_OUTPUT_DIR (default: ./outputs).",
    )
    parser.add_argument("--share-url", action="store_true", help="Print a shareable link to stderr.")
    parser.add_argument(
        "--validate",
        action="store_true",
        default=None,
        help="Validate the plan (default from SCRIPT_ARCHITECT_VALIDATE).",
    )
    parser.add_argument("--log-file", type=Path, help="Also append logs to this file.")
    return parser


def _load_request_file(parser: argparse.ArgumentParser, path: Path) -> Dict[str, Any]:
    if not path.exists():
        parser.error(f"Request file not found: {path}")
    try:
        data = load_json(path)
    except json.JSONDecodeError as exc:
        parser.error(f"Request file is not valid JSON: {path} ({exc})")
    if not isinstance(data, dict):
        parser.error(f"Request file must contain a JSON object: {path}")
    # Snake_case field names become their camelCase aliases; anything else passes through.
    return {
        (to_camel(key) if key in ScriptRequest.model_fields else key): value
        for key, value in data.items()
    }


def resolve_request(parser: argparse.ArgumentParser, args: argparse.Namespace) -> ScriptRequest:
    """
    Merges request sources. Later sources win: defaults, --query,
    --request-file, then individual flags.
    """
    request = DEFAULT_REQUEST
    if args.query:
        request = request_from_params(args.query, base=request)

    if args.request_file:
        merged = {**request.model_dump(by_alias=True), **_load_request_file(parser, args.request_file)}
        try:
            request = ScriptRequest.model_validate(merged)
        except ValidationError as exc:
            parser.error(f"Invalid request file {args.request_file}: {exc}")

    updates = {
        field: getattr(args, dest)
        for dest, field in FLAG_FIELDS.items()
        if getattr(args, dest) is not None
    }
    if args.story_file:
        if not args.story_file.exists():
            parser.error(f"Story file not found: {args.story_file}")
        updates["story"] = args.story_file.read_text(encoding="utf-8")
    return request.model_copy(update=updates)


def main(argv: List[str] | None = None) -> int:
    """
    Parses arguments, generates the plan and writes it out.

    Returns:
        0 on success, 1 when validation reports errors.
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    settings = load_settings()
    setup_logging(args.log_file, level=settings.log_level)

    request = resolve_request(parser, args)
    script = generate(request)
    share_url = build_share_url(request, settings.share_base_url)

    exit_code = 0
    should_validate = settings.validate_plans if args.validate is None else args.validate
    if should_validate:
        report = validate_plan(script)
        for issue in report.issues:
            level = logging.ERROR if issue.severity == "error" else logging.WARNING
            LOGGER.log(level, "[%s] %s", issue.code, issue.message)
        if not report.is_valid:
            exit_code = 1

    output_dir = args.output_dir
    if output_dir is None and args.export:
        output_dir = ensure_output_dir(settings)
    if output_dir:
        export_plan(script, output_dir, slug=request.topic, share_url=share_url)
    elif args.format == "markdown":
        sys.stdout.write(render_markdown(script))
    else:
        sys.stdout.write(json.dumps(plan_document(script), ensure_ascii=False, indent=2) + "\n")

    if args.share_url:
        print(share_url, file=sys.stderr)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
