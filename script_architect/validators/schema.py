from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable

from jsonschema import Draft202012Validator

from ..models import ValidationIssue


SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "video_script.schema.json"


@lru_cache(maxsize=1)
def _load_schema() -> Dict[str, Any]:
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found at {SCHEMA_PATH}")
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_plan_schema(plan: Dict[str, Any]) -> Iterable[ValidationIssue]:
    schema = _load_schema()
    validator = Draft202012Validator(schema)
    for error in sorted(validator.iter_errors(plan), key=lambda e: [str(part) for part in e.path]):
        yield ValidationIssue(
            code="schema.validation",
            message=error.message,
            severity="error",
            context={"path": list(error.path)},
        )
