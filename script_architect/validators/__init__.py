"""Schema and rule checks for generated plans."""

from __future__ import annotations

from typing import Any, Dict, Union

from ..models import ValidationReport, VideoScript
from .rules import validate_plan_rules
from .schema import validate_plan_schema


def validate_plan(plan: Union[VideoScript, Dict[str, Any]]) -> ValidationReport:
    """
    Run schema and rule validation on a generated plan.

    Args:
        plan: A VideoScript or its camelCase JSON document.

    Returns:
        A ValidationReport; ``is_valid`` is False when any error-level issue exists.
    """
    if isinstance(plan, VideoScript):
        plan = plan.model_dump(mode="json", by_alias=True)
    issues = list(validate_plan_schema(plan)) + list(validate_plan_rules(plan))
    is_valid = not any(issue.severity == "error" for issue in issues)
    return ValidationReport(is_valid=is_valid, issues=issues)


__all__ = ["validate_plan", "validate_plan_rules", "validate_plan_schema"]
