"""Tests for config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintreview.core.config import LintReviewConfig, load_config
from lintreview.core.errors import ConfigurationError
from lintreview.core.models import FilterMode


class TestLoadConfig:
    def test_defaults_when_no_config_file(self, tmp_path: Path):
        """Without a lintreview.toml, load_config should return defaults."""
        config = load_config(tmp_path)

        assert isinstance(config, LintReviewConfig)
        assert config.lint.report_file == "app/build/reports/lint/lint-result.xml"
        assert config.lint.gradle_task == "lint"
        assert config.lint.skip_gradle_task is False
        assert config.lint.severity == "Warning"
        assert config.lint.filtering == FilterMode.NONE
        assert config.lint.excluding_issue_ids == []
        assert config.lint.correction_file == "lint-correction.json"
        assert config.review.inline_mode is False
        assert config.review.base == "HEAD"
        assert config.review.host == "console"

    def test_loads_lint_section(self, tmp_path: Path):
        toml_content = """\
[lint]
report_file = "build/lint.xml"
gradle_task = "lintDebug"
skip_gradle_task = true
severity = "Error"
filtering = "line"
excluding_issue_ids = ["HardcodedText", "IconMissingDensityFolder"]
correction_file = "config/corrections.json"
"""
        (tmp_path / "lintreview.toml").write_text(toml_content)
        config = load_config(tmp_path)

        assert config.lint.report_file == "build/lint.xml"
        assert config.lint.gradle_task == "lintDebug"
        assert config.lint.skip_gradle_task is True
        assert config.lint.severity == "Error"
        assert config.lint.filtering == FilterMode.LINE
        assert config.lint.excluding_issue_ids == ["HardcodedText", "IconMissingDensityFolder"]
        assert config.lint.correction_file == "config/corrections.json"

    def test_severity_is_not_validated_at_load(self, tmp_path: Path):
        (tmp_path / "lintreview.toml").write_text('[lint]\nseverity = "Critical"\n')
        assert load_config(tmp_path).lint.severity == "Critical"

    def test_excluding_ids_as_comma_separated_string(self, tmp_path: Path):
        (tmp_path / "lintreview.toml").write_text(
            '[lint]\nexcluding_issue_ids = "MissingTranslation, UnusedResources"\n'
        )
        assert load_config(tmp_path).lint.excluding_issue_ids == [
            "MissingTranslation", "UnusedResources",
        ]

    def test_excluding_ids_single_string_is_one_id(self, tmp_path: Path):
        (tmp_path / "lintreview.toml").write_text('[lint]\nexcluding_issue_ids = "IconMissingDensityFolder"\n')
        assert load_config(tmp_path).lint.excluding_issue_ids == ["IconMissingDensityFolder"]

    @pytest.mark.parametrize("value", ["42", "[1, 2]", "{ id = \"X\" }"])
    def test_excluding_ids_wrong_type(self, tmp_path: Path, value: str):
        (tmp_path / "lintreview.toml").write_text(f"[lint]\nexcluding_issue_ids = {value}\n")
        with pytest.raises(ConfigurationError, match="excluding_issue_ids"):
            load_config(tmp_path)

    def test_loads_review_section(self, tmp_path: Path):
        toml_content = """\
[review]
inline_mode = true
base = "origin/main"
host = "github"
"""
        (tmp_path / "lintreview.toml").write_text(toml_content)
        config = load_config(tmp_path)

        assert config.review.inline_mode is True
        assert config.review.base == "origin/main"
        assert config.review.host == "github"


class TestFilteringFlags:
    @pytest.mark.parametrize(
        ("lines", "expected"),
        [
            ("filtering = true", FilterMode.FILE),
            ("filtering_lines = true", FilterMode.LINE),
            ("filtering = true\nfiltering_lines = true", FilterMode.LINE),
            ("filtering = false", FilterMode.NONE),
            ('filtering = "file"', FilterMode.FILE),
        ],
    )
    def test_filter_mode(self, tmp_path: Path, lines: str, expected: FilterMode):
        (tmp_path / "lintreview.toml").write_text(f"[lint]\n{lines}\n")
        assert load_config(tmp_path).lint.filtering == expected

    def test_unknown_mode(self, tmp_path: Path):
        (tmp_path / "lintreview.toml").write_text('[lint]\nfiltering = "hunk"\n')
        with pytest.raises(ConfigurationError):
            load_config(tmp_path)
