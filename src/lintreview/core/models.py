"""Shared data models used across lintreview modules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from lintreview.core.errors import ConfigurationError


class Severity(enum.Enum):
    """Lint severities, declared lowest first."""

    WARNING = "Warning"
    ERROR = "Error"
    FATAL = "Fatal"

    @classmethod
    def ordered(cls) -> list[Severity]:
        return list(cls)

    @classmethod
    def rank_of(cls, value: str) -> int:
        """Rank of a raw severity string; unknown strings rank like Warning."""
        for index, severity in enumerate(cls):
            if severity.value == value:
                return index
        return 0

    @classmethod
    def parse(cls, value: str) -> Severity:
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f"'{value}' is not a valid value for `severity` parameter."
            ) from None

    @property
    def rank(self) -> int:
        return Severity.rank_of(self.value)


class FilterMode(enum.Enum):
    NONE = "none"
    FILE = "file"
    LINE = "line"

    @classmethod
    def parse(cls, value: str) -> FilterMode:
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f"'{value}' is not a valid value for `filtering` parameter."
            ) from None

    @classmethod
    def from_flags(cls, filtering: bool, filtering_lines: bool) -> FilterMode:
        if filtering_lines:
            return cls.LINE
        if filtering:
            return cls.FILE
        return cls.NONE


class AnnotationLevel(enum.Enum):
    WARN = "warn"
    FAIL = "fail"


@dataclass(frozen=True)
class Issue:
    """A single finding read from the lint report.

    ``severity`` keeps the raw report string so that an unrecognized value
    never compares equal to a known :class:`Severity`.
    """

    id: str
    severity: str
    file: str
    line: int
    message: str

    @property
    def rank(self) -> int:
        return Severity.rank_of(self.severity)


@dataclass(frozen=True)
class CorrectionRule:
    """Literal-text fix for one issue id in files with one extension."""

    issue_id: str
    ext: str
    target_error: str
    correction: str
    required_import: str | None = None


@dataclass(frozen=True)
class ChangeSet:
    """Files touched by the change under review, relative to the repo root."""

    modified: frozenset[str] = frozenset()
    added: frozenset[str] = frozenset()
    deleted: frozenset[str] = frozenset()

    @property
    def target_files(self) -> frozenset[str]:
        return (self.modified - self.deleted) | self.added


@dataclass(frozen=True)
class Annotation:
    """One inline comment posted to the review host."""

    level: AnnotationLevel
    message: str
    file: str
    line: int
    comment: str | None = None


@dataclass
class ReviewResult:
    """Outcome of a single review run."""

    markdown: str = ""
    annotations: list[Annotation] = field(default_factory=list)
    issue_count: int = 0
    reported_count: int = 0
    blocking_count: int = 0  # reported Error/Fatal issues
