"""lintreview run command."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from lintreview.annotate.hosts import HOSTS, RecordingHost
from lintreview.core.config import load_config
from lintreview.core.errors import LintReviewError
from lintreview.core.models import FilterMode
from lintreview.core.output import print_error, print_review_footer
from lintreview.review.engine import LintReviewer


@click.command()
@click.option("--inline", "inline_mode", is_flag=True, help="Post inline annotations instead of a summary table")
@click.option("--severity", type=str, default=None, help="Lowest severity to report: Warning, Error or Fatal")
@click.option("--filter", "filtering", type=click.Choice([m.value for m in FilterMode]), default=None, help="Scope issues to changed files or changed lines")
@click.option("--exclude", type=str, default=None, help="Issue ids to ignore (comma-separated)")
@click.option("--report", "report_file", type=str, default=None, help="Path to the lint XML report")
@click.option("--gradle-task", type=str, default=None, help="Gradle task that produces the report")
@click.option("--skip-gradle", is_flag=True, help="Use the existing report without running Gradle")
@click.option("--corrections", "correction_file", type=str, default=None, help="Correction rule file (JSON)")
@click.option("--base", type=str, default=None, help="Git revision the change is compared against")
@click.option("--host", type=click.Choice(sorted(HOSTS)), default=None, help="Where inline annotations go")
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True), default=None, help="Write the summary or JSON annotations to a file")
@click.option("--fail-on-error", is_flag=True, help="Exit 1 when Error or Fatal issues are reported (for CI)")
@click.option("--project", "-p", "project", default=".", help="Project directory (default: current dir)")
def run(
    inline_mode: bool,
    severity: str | None,
    filtering: str | None,
    exclude: str | None,
    report_file: str | None,
    gradle_task: str | None,
    skip_gradle: bool,
    correction_file: str | None,
    base: str | None,
    host: str | None,
    output: str | None,
    fail_on_error: bool,
    project: str,
):
    """Review the lint report against the current change.

    Without --inline, prints a markdown summary suitable for a PR comment.
    """
    project_path = Path(project).resolve()
    try:
        config = load_config(project_path)
    except LintReviewError as exc:
        print_error(str(exc))
        sys.exit(1)

    if severity is not None:
        config.lint.severity = severity
    if filtering is not None:
        config.lint.filtering = FilterMode(filtering)
    if exclude:
        config.lint.excluding_issue_ids = [i.strip() for i in exclude.split(",") if i.strip()]
    if report_file:
        config.lint.report_file = report_file
    if gradle_task:
        config.lint.gradle_task = gradle_task
    if skip_gradle:
        config.lint.skip_gradle_task = True
    if correction_file:
        config.lint.correction_file = correction_file
    if base:
        config.review.base = base
    if host:
        config.review.host = host
    if inline_mode:
        config.review.inline_mode = True

    recorder = RecordingHost() if config.review.host == RecordingHost.name else None
    reviewer = LintReviewer(project_path, config, host=recorder)

    try:
        result = reviewer.run()
    except LintReviewError as exc:
        print_error(str(exc))
        sys.exit(1)

    text = ""
    if config.review.inline_mode:
        if recorder is not None:
            text = recorder.to_json()
    else:
        text = result.markdown

    if output:
        Path(output).write_text(text + "\n" if text else "")
    elif text:
        click.echo(text)

    print_review_footer(result)

    if fail_on_error and result.blocking_count:
        sys.exit(1)
