"""Review engine: report + change -> summary table or inline annotations."""

from __future__ import annotations

import logging
from pathlib import Path

from lintreview.annotate.hosts import HOSTS, ReviewHost
from lintreview.annotate.inline import InlineAnnotator
from lintreview.build.gradle import gradlew_exists, run_gradle_task
from lintreview.core.config import LintReviewConfig, load_config
from lintreview.core.errors import ConfigurationError, PreconditionError
from lintreview.core.models import ChangeSet, FilterMode, ReviewResult, Severity
from lintreview.diff.mapper import AddedLineIndex
from lintreview.filtering.scope import ScopeFilter
from lintreview.filtering.severity import (
    exclude_by_ids,
    filter_by_threshold,
    group_by_severity_desc,
)
from lintreview.fix.corrections import CorrectionEngine, load_rules
from lintreview.render.markdown import render_summary, wrap_summary
from lintreview.report.parser import load_issues
from lintreview.vcs.git import GitRepository

logger = logging.getLogger(__name__)


class LintReviewer:
    """Runs one review pass over a project.

    The run is linear: build step, severity check, report check, then
    filtering and either rendering or annotating. Any abort happens before
    output is produced.
    """

    def __init__(
        self,
        project_path: Path | None = None,
        config: LintReviewConfig | None = None,
        host: ReviewHost | None = None,
        repository: GitRepository | None = None,
    ):
        self.project_path = (project_path or Path.cwd()).resolve()
        self.config = config or load_config(self.project_path)
        self.host = host
        self.repository = repository or GitRepository(self.project_path, self.config.review.base)

    def run(self, inline_mode: bool | None = None) -> ReviewResult:
        lint = self.config.lint
        if inline_mode is None:
            inline_mode = self.config.review.inline_mode

        if not lint.skip_gradle_task and not gradlew_exists(self.project_path):
            raise PreconditionError("Could not find `gradlew` inside current directory")

        threshold = Severity.parse(lint.severity)
        host = self._host() if inline_mode else None

        if not lint.skip_gradle_task:
            run_gradle_task(self.project_path, lint.gradle_task)

        report_path = self._resolve(lint.report_file)
        if not report_path.exists():
            raise PreconditionError(
                f"Lint report not found at `{lint.report_file}`. "
                "Have you forgot to add `xmlReport true` to your `build.gradle` file?"
            )

        issues = load_issues(report_path)
        added_lines = AddedLineIndex(self._patch_for)
        scope = ScopeFilter(self._change_set(), lint.filtering, self.project_path, added_lines)

        selected = exclude_by_ids(issues, lint.excluding_issue_ids)
        selected = filter_by_threshold(selected, threshold)
        selected = scope.apply(selected)
        groups = group_by_severity_desc(selected)

        result = ReviewResult(
            issue_count=len(issues),
            reported_count=sum(len(members) for _, members in groups),
            blocking_count=sum(
                len(members) for severity, members in groups if severity != Severity.WARNING
            ),
        )
        logger.debug(
            "%d issues in report, %d reported (threshold %s, filtering %s)",
            result.issue_count, result.reported_count, threshold.value, lint.filtering.value,
        )

        if inline_mode:
            rules = load_rules(self._resolve(lint.correction_file))
            engine = CorrectionEngine(rules, self.project_path)
            annotator = InlineAnnotator(host, engine, added_lines, self.project_path)
            result.annotations = annotator.annotate(groups)
            host.finish()
        else:
            body = render_summary(groups, self.project_path)
            result.markdown = wrap_summary(body) if body else ""

        return result

    def _host(self) -> ReviewHost:
        if self.host is not None:
            return self.host
        host_cls = HOSTS.get(self.config.review.host)
        if host_cls is None:
            raise ConfigurationError(
                f"'{self.config.review.host}' is not a valid value for `host` parameter."
            )
        self.host = host_cls()
        return self.host

    def _change_set(self) -> ChangeSet:
        if self.config.lint.filtering == FilterMode.NONE:
            return ChangeSet()
        return self.repository.change_set()

    def _patch_for(self, path: str) -> str | None:
        try:
            return self.repository.patch_for(path)
        except PreconditionError:
            if self.config.lint.filtering != FilterMode.NONE:
                raise
            logger.debug("No diff available for %s; corrections skipped", path)
            return None

    def _resolve(self, file: str) -> Path:
        path = Path(file)
        if path.is_absolute():
            return path
        return self.project_path / path
