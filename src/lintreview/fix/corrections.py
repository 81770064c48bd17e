"""Correction rules: literal-text fixes suggested alongside inline comments.

A rule file is a JSON array of records such as::

    [
        {
            "issue_id": "LogNotTimber",
            "ext": ".kt",
            "target_error": "Log.d(",
            "correction": "Timber.d(",
            "required_import": "import timber.log.Timber"
        }
    ]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePosixPath

from lintreview.core.models import CorrectionRule, Issue
from lintreview.filtering.scope import relative_path

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("issue_id", "ext", "target_error", "correction")


def load_rules(path: Path) -> list[CorrectionRule]:
    """Read the rule file once; a missing or broken file means no fixes."""
    if not path.exists():
        logger.debug("No correction file at %s", path)
        return []

    try:
        data = json.loads(path.read_text())
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable correction file %s: %s", path, exc)
        return []

    if not isinstance(data, list):
        logger.warning("Ignoring correction file %s: expected a JSON array", path)
        return []

    rules: list[CorrectionRule] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict) or any(
            not isinstance(record.get(key), str) for key in _REQUIRED_KEYS
        ):
            logger.warning("Skipping malformed correction rule #%d in %s", index, path)
            continue
        rules.append(CorrectionRule(
            issue_id=record["issue_id"],
            ext=record["ext"],
            target_error=record["target_error"],
            correction=record["correction"],
            required_import=record.get("required_import") or None,
        ))
    return rules


class CorrectionEngine:
    """Decides per issue whether a literal fix can be offered."""

    def __init__(self, rules: list[CorrectionRule], base_dir: Path):
        self.rules = tuple(rules)
        self.base_dir = base_dir

    def resolve(self, issue: Issue, added_lines: dict[int, str]) -> str | None:
        """Return the corrected added line, or ``None`` when no fix applies."""
        if not self.rules or issue.line not in added_lines:
            return None

        filename = relative_path(issue.file, self.base_dir)
        rule = self.match(issue.id, filename)
        if rule is None:
            return None

        if rule.required_import and not self._has_import(filename, rule.required_import):
            return None

        return added_lines[issue.line].replace(rule.target_error, rule.correction, 1)

    def match(self, issue_id: str, filename: str) -> CorrectionRule | None:
        ext = PurePosixPath(filename).suffix
        return next(
            (r for r in self.rules if r.issue_id == issue_id and r.ext == ext),
            None,
        )

    def _has_import(self, filename: str, required_import: str) -> bool:
        file_path = self.base_dir / filename
        try:
            with open(file_path, encoding="utf-8", errors="ignore") as f:
                return any(line.strip() == required_import for line in f)
        except OSError:
            logger.debug("Cannot read %s for import check", file_path)
            return False
