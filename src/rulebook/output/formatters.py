"""Human/JSON output helpers.

A ValidationReport is rendered for humans (one ``label: message`` line per
leaf, nested labels joined with dots) or machines (``json_output=True``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rulebook.output.report import ValidationReport


def _flatten(tree: dict[str, Any], prefix: str = "") -> list[str]:
    """Turn a nested message tree into ``a.b: message`` lines, sorted by label."""
    lines: list[str] = []
    for label in sorted(tree):
        value = tree[label]
        path = f"{prefix}.{label}" if prefix else label
        if isinstance(value, dict):
            lines.extend(_flatten(value, path))
        else:
            lines.append(f"  {path}: {value}")
    return lines


def format_report(report: ValidationReport, *, json_output: bool = False) -> str:
    """Format a ValidationReport for display.

    Args:
        report: The report to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return report.model_dump_json(indent=2, exclude_none=True)
    if report.ok:
        return f"OK: {report.op}"
    if report.errors:
        return "\n".join([f"INVALID: {report.op}", *_flatten(report.errors)])
    return f"INVALID: {report.op}: {report.message}"
