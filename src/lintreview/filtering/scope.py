"""Restrict issues to the files and lines touched by a change."""

from __future__ import annotations

from pathlib import Path

from lintreview.core.models import ChangeSet, FilterMode, Issue
from lintreview.diff.mapper import AddedLineIndex


def relative_path(path: str, base_dir: Path | str) -> str:
    """Strip the project prefix that lint writes into absolute report paths."""
    prefix = f"{str(base_dir).rstrip('/')}/"
    return path.replace(prefix, "")


class ScopeFilter:
    """Decides whether an issue overlaps the change under review."""

    def __init__(
        self,
        change_set: ChangeSet,
        mode: FilterMode,
        base_dir: Path | str,
        added_lines: AddedLineIndex,
    ):
        self.change_set = change_set
        self.mode = mode
        self.base_dir = base_dir
        self.added_lines = added_lines

    def in_scope(self, issue: Issue) -> bool:
        if self.mode == FilterMode.NONE:
            return True

        filename = relative_path(issue.file, self.base_dir)
        if filename not in self.change_set.target_files:
            return False
        if self.mode == FilterMode.LINE:
            return issue.line in self.added_lines.for_file(filename)
        return True

    def apply(self, issues: list[Issue]) -> list[Issue]:
        return [issue for issue in issues if self.in_scope(issue)]
