"""Output formatting for check results."""

import json
from typing import Literal

from ..validators.base import Severity, ValidationIssue, ValidationResult

_SECTIONS = (
    ("ERRORS", Severity.ERROR, "✘"),
    ("WARNINGS", Severity.WARNING, "⚠"),
)


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a check result for output.

    Args:
        result: The check result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_text(result: ValidationResult) -> str:
    lines: list[str] = []

    for title, severity, symbol in _SECTIONS:
        issues = result.by_severity(severity)
        lines.append(f"{title}:")
        lines.extend(f"  {symbol} {_describe(issue)}" for issue in issues)
        if not issues:
            lines.append("  (none)")
        lines.append("")

    lines.append(_summary(result))
    return "\n".join(lines)


def _describe(issue: ValidationIssue) -> str:
    if issue.location:
        return f"{issue.code}: {issue.location} {issue.message}"
    return f"{issue.code}: {issue.message}"


def _summary(result: ValidationResult) -> str:
    error_count = len(result.errors)
    warning_count = len(result.warnings)
    if error_count:
        return f"Check failed: {error_count} error(s), {warning_count} warning(s)"
    if warning_count:
        return f"Check passed with {warning_count} warning(s)"
    return "Check passed"


def _format_json(result: ValidationResult) -> str:
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "severity": issue.severity.value,
                "node": issue.node,
                "label": issue.label,
                "message": issue.message,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)
