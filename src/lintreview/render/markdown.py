"""Markdown summary tables for review comments."""

from __future__ import annotations

from pathlib import Path

from lintreview.core.models import Issue, Severity
from lintreview.filtering.scope import relative_path

SUMMARY_TITLE = "### AndroidLint found issues"


def _cell(text: str) -> str:
    """Keep a value inside one table cell."""
    return " ".join(text.splitlines()).replace("|", "\\|")


def render_group(severity: Severity, issues: list[Issue], base_dir: Path | str) -> str:
    lines = [
        f"#### {severity.value} ({len(issues)})\n",
        "\n",
        "| File | Line | Reason |\n",
        "| ---- | ---- | ------ |\n",
    ]
    for issue in issues:
        filename = relative_path(issue.file, base_dir)
        lines.append(f"`{_cell(filename)}` | {issue.line} | {_cell(issue.message)} \n")
    return "".join(lines)


def render_summary(
    groups: list[tuple[Severity, list[Issue]]],
    base_dir: Path | str,
) -> str:
    """Render grouped issues, highest severity first; ``""`` when empty."""
    return "".join(
        render_group(severity, issues, base_dir) for severity, issues in groups if issues
    )


def wrap_summary(body: str) -> str:
    return f"{SUMMARY_TITLE}\n\n{body}"
