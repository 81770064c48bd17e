"""Severity-tiered filtering and grouping of lint issues."""

from __future__ import annotations

from typing import Iterable

from lintreview.core.models import Issue, Severity


def filter_by_threshold(issues: Iterable[Issue], threshold: Severity) -> list[Issue]:
    """Keep issues ranked at or above ``threshold``.

    Unrecognized severities rank like Warning, so they pass a Warning
    threshold even though they belong to no severity group.
    """
    return [issue for issue in issues if issue.rank >= threshold.rank]


def exclude_by_ids(issues: Iterable[Issue], excluded_ids: Iterable[str]) -> list[Issue]:
    excluded = set(excluded_ids)
    return [issue for issue in issues if issue.id not in excluded]


def group_by_severity_desc(issues: Iterable[Issue]) -> list[tuple[Severity, list[Issue]]]:
    """Group issues from Fatal down to Warning, dropping empty groups."""
    issues = list(issues)
    groups = []
    for severity in reversed(Severity.ordered()):
        members = [issue for issue in issues if issue.severity == severity.value]
        if members:
            groups.append((severity, members))
    return groups
