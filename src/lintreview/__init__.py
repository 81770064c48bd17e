"""lintreview: change-scoped Android Lint feedback for code review."""

from lintreview._version import __version__
from lintreview.core.models import Annotation, ChangeSet, FilterMode, Issue, Severity
from lintreview.diff.mapper import parse_added_lines
from lintreview.review.engine import LintReviewer

__all__ = [
    "__version__",
    "Annotation",
    "ChangeSet",
    "FilterMode",
    "Issue",
    "LintReviewer",
    "Severity",
    "parse_added_lines",
]
