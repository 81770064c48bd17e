"""Post one inline annotation per in-scope issue."""

from __future__ import annotations

from pathlib import Path

from lintreview.annotate.hosts import ReviewHost
from lintreview.core.models import Annotation, AnnotationLevel, Issue, Severity
from lintreview.diff.mapper import AddedLineIndex
from lintreview.filtering.scope import relative_path
from lintreview.fix.corrections import CorrectionEngine

ANNOTATION_LEVELS: dict[Severity, AnnotationLevel] = {
    Severity.WARNING: AnnotationLevel.WARN,
    Severity.ERROR: AnnotationLevel.FAIL,
    Severity.FATAL: AnnotationLevel.FAIL,
}


class InlineAnnotator:
    """Turns grouped issues into host annotations, with fixes when available."""

    def __init__(
        self,
        host: ReviewHost,
        engine: CorrectionEngine,
        added_lines: AddedLineIndex,
        base_dir: Path,
    ):
        self.host = host
        self.engine = engine
        self.added_lines = added_lines
        self.base_dir = base_dir

    def build(self, severity: Severity, issue: Issue) -> Annotation:
        filename = relative_path(issue.file, self.base_dir)
        comment = self.engine.resolve(issue, self.added_lines.for_file(filename))
        return Annotation(
            level=ANNOTATION_LEVELS[severity],
            message=issue.message,
            file=filename,
            line=issue.line,
            comment=comment,
        )

    def annotate(self, groups: list[tuple[Severity, list[Issue]]]) -> list[Annotation]:
        annotations = []
        for severity, issues in groups:
            for issue in issues:
                annotation = self.build(severity, issue)
                self.host.post(annotation)
                annotations.append(annotation)
        return annotations
