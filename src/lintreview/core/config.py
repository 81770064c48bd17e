"""Configuration management for lintreview (lintreview.toml parsing + defaults)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lintreview.core.errors import ConfigurationError
from lintreview.core.models import FilterMode

try:
    import tomllib
except ImportError:
    try:
        import tomli as tomllib  # type: ignore[no-redef]
    except ImportError:
        tomllib = None  # type: ignore[assignment]

CONFIG_FILE_NAME = "lintreview.toml"


@dataclass
class LintConfig:
    report_file: str = "app/build/reports/lint/lint-result.xml"
    gradle_task: str = "lint"
    skip_gradle_task: bool = False
    severity: str = "Warning"
    filtering: FilterMode = FilterMode.NONE
    excluding_issue_ids: list[str] = field(default_factory=list)
    correction_file: str = "lint-correction.json"


@dataclass
class ReviewConfig:
    inline_mode: bool = False
    base: str = "HEAD"
    host: str = "console"


@dataclass
class LintReviewConfig:
    """Complete lintreview configuration."""

    lint: LintConfig = field(default_factory=LintConfig)
    review: ReviewConfig = field(default_factory=ReviewConfig)


def load_config(project_path: Path | None = None) -> LintReviewConfig:
    """Load configuration from lintreview.toml if present, otherwise return defaults."""
    config = LintReviewConfig()

    if project_path is None:
        project_path = Path.cwd()

    config_file = project_path / CONFIG_FILE_NAME
    if not config_file.exists():
        return config

    if tomllib is None:
        return config

    with open(config_file, "rb") as f:
        data = tomllib.load(f)

    if "lint" in data:
        lt = data["lint"]
        for attr in (
            "report_file",
            "gradle_task",
            "skip_gradle_task",
            "severity",
            "correction_file",
        ):
            if attr in lt:
                setattr(config.lint, attr, lt[attr])
        if "excluding_issue_ids" in lt:
            config.lint.excluding_issue_ids = _issue_ids(lt["excluding_issue_ids"])
        config.lint.filtering = _filter_mode(
            lt.get("filtering", False), lt.get("filtering_lines", False)
        )

    if "review" in data:
        rv = data["review"]
        for attr in ("inline_mode", "base", "host"):
            if attr in rv:
                setattr(config.review, attr, rv[attr])

    return config


def _issue_ids(value: object) -> list[str]:
    """Accept a list of ids or a single comma-separated string."""
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigurationError("`excluding_issue_ids` must be a list of issue ids.")


def _filter_mode(filtering: bool | str, filtering_lines: bool) -> FilterMode:
    """Accept either a mode name or the legacy pair of booleans."""
    if isinstance(filtering, str):
        if filtering_lines:
            return FilterMode.LINE
        return FilterMode.parse(filtering)
    if not isinstance(filtering, bool) or not isinstance(filtering_lines, bool):
        raise ConfigurationError("`filtering` must be a mode name or a boolean.")
    return FilterMode.from_flags(filtering, filtering_lines)
