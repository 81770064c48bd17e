"""Tests for correction rule loading and matching."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from lintreview.core.models import CorrectionRule, Issue
from lintreview.fix.corrections import CorrectionEngine, load_rules

TIMBER_RULE = CorrectionRule(
    issue_id="LogNotTimber",
    ext=".kt",
    target_error="Log.d(",
    correction="Timber.d(",
    required_import="import timber.log.Timber",
)


def _issue(file: str = "app/Main.kt", line: int = 5, issue_id: str = "LogNotTimber") -> Issue:
    return Issue(id=issue_id, severity="Warning", file=file, line=line, message="use Timber")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "app").mkdir()
    (tmp_path / "app" / "Main.kt").write_text(
        "package app\n\n    import timber.log.Timber   \n\nfun main() {}\n"
    )
    (tmp_path / "app" / "Bare.kt").write_text("package app\n\nfun main() {}\n")
    return tmp_path


# ---------------------------------------------------------------------------
# load_rules
# ---------------------------------------------------------------------------
class TestLoadRules:
    def test_missing_file_means_no_rules(self, tmp_path: Path):
        assert load_rules(tmp_path / "lint-correction.json") == []

    def test_loads_records(self, tmp_path: Path):
        path = tmp_path / "lint-correction.json"
        path.write_text(json.dumps([
            {
                "issue_id": "LogNotTimber",
                "ext": ".kt",
                "target_error": "Log.d(",
                "correction": "Timber.d(",
                "required_import": "import timber.log.Timber",
            },
            {"issue_id": "Other", "ext": ".java", "target_error": "a", "correction": "b"},
        ]))
        rules = load_rules(path)
        assert rules[0] == TIMBER_RULE
        assert rules[1].required_import is None

    def test_invalid_json_is_degraded(self, tmp_path: Path, caplog):
        path = tmp_path / "lint-correction.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING):
            assert load_rules(path) == []
        assert "unreadable correction file" in caplog.text

    def test_non_array_document_is_degraded(self, tmp_path: Path):
        path = tmp_path / "lint-correction.json"
        path.write_text('{"issue_id": "X"}')
        assert load_rules(path) == []

    def test_malformed_records_are_skipped(self, tmp_path: Path):
        path = tmp_path / "lint-correction.json"
        path.write_text(json.dumps([
            {"issue_id": "X", "ext": ".kt"},
            {"issue_id": "Y", "ext": ".kt", "target_error": "a", "correction": "b"},
        ]))
        assert [r.issue_id for r in load_rules(path)] == ["Y"]


# ---------------------------------------------------------------------------
# CorrectionEngine.resolve
# ---------------------------------------------------------------------------
class TestResolve:
    def test_replaces_target_when_import_present(self, project: Path):
        engine = CorrectionEngine([TIMBER_RULE], project)
        fix = engine.resolve(_issue(), {5: '    Log.d(TAG, "hi")'})
        assert fix == '    Timber.d(TAG, "hi")'

    def test_absolute_report_path_is_normalized(self, project: Path):
        engine = CorrectionEngine([TIMBER_RULE], project)
        fix = engine.resolve(_issue(file=f"{project}/app/Main.kt"), {5: "Log.d(x)"})
        assert fix == "Timber.d(x)"

    def test_no_fix_when_import_missing(self, project: Path):
        engine = CorrectionEngine([TIMBER_RULE], project)
        assert engine.resolve(_issue(file="app/Bare.kt"), {5: "Log.d(x)"}) is None

    def test_no_fix_when_source_unreadable(self, project: Path):
        engine = CorrectionEngine([TIMBER_RULE], project)
        assert engine.resolve(_issue(file="app/Missing.kt"), {5: "Log.d(x)"}) is None

    def test_no_import_requirement(self, project: Path):
        rule = CorrectionRule("LogNotTimber", ".kt", "Log.d(", "Timber.d(")
        engine = CorrectionEngine([rule], project)
        assert engine.resolve(_issue(file="app/Bare.kt"), {5: "Log.d(x)"}) == "Timber.d(x)"

    def test_only_first_occurrence_replaced(self, project: Path):
        engine = CorrectionEngine([TIMBER_RULE], project)
        assert engine.resolve(_issue(), {5: "Log.d(a); Log.d(b)"}) == "Timber.d(a); Log.d(b)"

    def test_target_is_literal_not_pattern(self, project: Path):
        rule = CorrectionRule("LogNotTimber", ".kt", "a.b", "X")
        engine = CorrectionEngine([rule], project)
        assert engine.resolve(_issue(), {5: "axb a.b"}) == "axb X"

    def test_no_rules(self, project: Path):
        assert CorrectionEngine([], project).resolve(_issue(), {5: "Log.d(x)"}) is None

    def test_line_not_added(self, project: Path):
        engine = CorrectionEngine([TIMBER_RULE], project)
        assert engine.resolve(_issue(line=6), {5: "Log.d(x)"}) is None

    def test_extension_must_match(self, project: Path):
        engine = CorrectionEngine([TIMBER_RULE], project)
        assert engine.resolve(_issue(file="app/Main.java"), {5: "Log.d(x)"}) is None

    def test_issue_id_must_match(self, project: Path):
        engine = CorrectionEngine([TIMBER_RULE], project)
        assert engine.resolve(_issue(issue_id="Other"), {5: "Log.d(x)"}) is None

    def test_first_matching_rule_wins(self, project: Path):
        first = CorrectionRule("LogNotTimber", ".kt", "Log.d(", "First.d(")
        second = CorrectionRule("LogNotTimber", ".kt", "Log.d(", "Second.d(")
        engine = CorrectionEngine([first, second], project)
        assert engine.resolve(_issue(), {5: "Log.d(x)"}) == "First.d(x)"

    def test_import_checked_against_matched_rule(self, project: Path):
        """A rule for another extension does not lend its import requirement."""
        java_rule = CorrectionRule("LogNotTimber", ".java", "Log.d(", "J", "import missing.Thing;")
        kt_rule = CorrectionRule("LogNotTimber", ".kt", "Log.d(", "Timber.d(")
        engine = CorrectionEngine([java_rule, kt_rule], project)
        assert engine.resolve(_issue(file="app/Bare.kt"), {5: "Log.d(x)"}) == "Timber.d(x)"

    def test_repeated_calls_are_stable(self, project: Path):
        engine = CorrectionEngine([TIMBER_RULE], project)
        added = {5: "Log.d(x)"}
        assert engine.resolve(_issue(), added) == engine.resolve(_issue(), added)
        assert added == {5: "Log.d(x)"}
